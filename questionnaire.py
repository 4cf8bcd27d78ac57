questionnaire = {
    1: {
        "title": "Omvang van de organisatie",
        "question": "Hoeveel medewerkers telt uw organisatie en wat is uw jaaromzet?",
        "options": {
            "small": "Klein: minder dan 50 medewerkers en maximaal 10M€ omzet",
            "medium": "Middelgroot: 50 tot 250 medewerkers of 10M€ tot 50M€ omzet",
            "large": "Groot: meer dan 250 medewerkers of meer dan 50M€ omzet",
        },
    },
    2: {
        "title": "Gevoeligheid van de dienstverlening",
        "question": "Hoe gevoelig zijn de diensten en gegevens die u voor uw cliënten beheert?",
        "options": {
            "low": "Laag: algemene diensten zonder vertrouwelijke cliëntgegevens",
            "medium": "Gemiddeld: beperkte verwerking van vertrouwelijke of persoonsgegevens",
            "high": "Hoog: juridische, boekhoudkundige of financiële diensten (Bijlage III)",
        },
    },
    3: {
        "title": "Digitale infrastructuur",
        "question": "Welke uitspraken zijn van toepassing op uw digitale infrastructuur?",
        "flags": {
            "cloud": "Wij gebruiken cloudinfrastructuur of SaaS-toepassingen voor kernprocessen",
            "mfa": "Multifactorauthenticatie (MFA) is ingeschakeld voor alle gebruikers",
            "incident_process": "Er bestaat een gedocumenteerd proces voor incidentrespons",
            "supply_chain": "Wij zijn afhankelijk van kritieke externe IT-leveranciers",
        },
    },
    4: {
        "title": "Volwassenheid van de governance",
        "question": "Hoe is het informatiebeveiligingsbeheer in uw organisatie georganiseerd?",
        "options": {
            "none": "Geen formeel beleid of verantwoordelijke",
            "basic": "Basis: enkele richtlijnen, geen systematische opvolging",
            "structured": "Gestructureerd: gedocumenteerd beleid met periodieke evaluatie",
            "iso": "ISO 27001-gecertificeerd informatiebeveiligingsbeheer",
        },
    },
}
