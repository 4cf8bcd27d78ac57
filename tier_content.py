"""
Static result text per exposure tier (Dutch, Belgian NIS2 transposition).
Based on Directive (EU) 2022/2555 and the Belgian law of 7 April 2024.
"""

from typing import Dict, List, Tuple
from pydantic import BaseModel, ConfigDict

from scoring import Tier


class TierContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    title: str
    implications: str
    obligations: Tuple[str, ...]
    timeline: str
    accountability: str
    positioning: str


class ResultSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading: str
    paragraphs: Tuple[str, ...] = ()
    items: Tuple[str, ...] = ()  # Rendered as a list, in order


TIER_CONTENT: Dict[Tier, TierContent] = {
    Tier.LOW: TierContent(
        label="Beperkte Blootstelling",
        title="Niveau 1: Beperkte Reglementaire Blootstelling",
        implications=(
            "Uw organisatie heeft een beperkte blootstelling aan de strikte NIS2-verplichtingen. "
            "Toch blijft waakzaamheid geboden wat betreft de waardeketen."
        ),
        obligations=(
            "Basis veiligheidsverplichtingen volgens artikel 21 van de NIS2-richtlijn",
            "Naleving van risicobeheersmaatregelen in verhouding tot uw grootte",
            "Regelgevend toezicht via het Centrum voor Cybersecurity België (CCB)",
        ),
        timeline=(
            "De Belgische omzetting is van kracht sinds oktober 2024. "
            "Geen 24u-meldingsplicht voor uw categorie, tenzij ernstig incident."
        ),
        accountability=(
            "Aansprakelijkheid van bestuurders omvat door algemeen recht. "
            "Geen specifieke NIS2-administratieve sancties, maar zorgvuldigheid vereist."
        ),
        positioning=(
            "Kans om uw cyber governance geleidelijk te structureren om regelgevende evolutie "
            "voor te zijn en stakeholders te geruststellen."
        ),
    ),
    Tier.MEDIUM: TierContent(
        label="Belangrijke Blootstelling",
        title="Niveau 2: Belangrijke Entiteit - Versterkte Verplichtingen",
        implications=(
            'Uw organisatie valt mogelijk onder de categorie "Belangrijke Entiteit" volgens '
            "Bijlage III van de NIS2-richtlijn. Specifieke verplichtingen zijn van toepassing."
        ),
        obligations=(
            "Meldplicht significante incidenten aan CCB binnen 24 uur (artikel 23)",
            "Implementatie van cyber risicobeheersmaatregelen (artikel 21)",
            "Beveiliging van de toeleveringsketen (artikel 21)",
            "Periodieke compliance audit en documentatie van maatregelen",
        ),
        timeline=(
            "Onmiddellijke inwerkingtreding sinds Belgische omzetting oktober 2024. "
            "Eerste regelgevende evaluatie verwacht binnen 12 maanden."
        ),
        accountability=(
            "Versterkte aansprakelijkheid bestuurders. Administratieve sancties tot 1,4% van "
            "wereldwijde omzet of 7M€ volgens Belgische wet."
        ),
        positioning=(
            "Snelle structurering van uw ISMS (Information Security Management System) wordt "
            "aanbevolen om proactieve compliance te demonstreren."
        ),
    ),
    Tier.HIGH: TierContent(
        label="Kritieke Blootstelling",
        title="Niveau 3: Hoge Blootstelling - Prioritaire Compliance",
        implications=(
            "Uw organisatie heeft een hoge blootstelling aan NIS2-verplichtingen, mogelijk als "
            "Essentiële of Belangrijke Entiteit met hoog risico. Onmiddellijke actie vereist."
        ),
        obligations=(
            "Verplichte 24u-melding aan CCB voor elk significant incident",
            "Jaarlijkse compliance audit door geaccrediteerde derde partij",
            "Strenge beveiligingsmaatregelen: toegangsbeheer, encryptie, MFA, continuïteitsplannen",
            "Due diligence op kritieke leveranciers en toeleveringsketen",
            "Verplichte documentatie van risicobeheersmaatregelen",
        ),
        timeline=(
            "Onmiddellijke naleving vereist. Wet van 7 april 2024 is van toepassing. "
            "CCB-controles worden uitgerold."
        ),
        accountability=(
            "Persoonlijke aansprakelijkheid bestuurders blootgesteld. Strenge strafrechtelijke en "
            "administratieve sancties (tot 10M€ of 2% wereldwijde omzet)."
        ),
        positioning=(
            "NIS2-compliance is een strategische prioriteit. Een gestructureerde aanpak, mogelijk "
            "via ISO 27001 certificering, wordt sterk aanbevolen om juridische en operationele "
            "risico's te mitigeren."
        ),
    ),
}


def tier_content(tier: Tier) -> TierContent:
    return TIER_CONTENT[Tier(tier)]


def tier_badge(tier: Tier) -> Tuple[str, str]:
    """Badge text and style classes for a tier, e.g. ("Kritieke Blootstelling", "tier-badge tier-3")."""
    tier = Tier(tier)
    return TIER_CONTENT[tier].label, f"tier-badge {tier.style}"


def result_sections(content: TierContent) -> List[ResultSection]:
    """The result page sections, in display order."""
    return [
        ResultSection(heading="📋 Juridische implicaties", paragraphs=(content.title, content.implications)),
        ResultSection(heading="⚖️ Reglementaire verplichtingen", items=content.obligations),
        ResultSection(heading="📅 Implementatietijdlijn", paragraphs=(content.timeline,)),
        ResultSection(heading="👔 Bestuurdersaansprakelijkheid", paragraphs=(content.accountability,)),
        ResultSection(heading="🎯 Strategische aanbeveling", paragraphs=(content.positioning,)),
    ]
