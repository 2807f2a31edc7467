"""Improvement tip catalog and random tip selection"""

import logging
import random
from types import MappingProxyType
from typing import Mapping, Optional

from penny_score.domain.models import Area, Tip, TipArea, TipSuggestion

logger = logging.getLogger(__name__)

_INCOME_JOB_TIPS = (
    Tip("Bed om lønforhøjelse - selv 2.000 kr mere/md giver +10-15 point", "10-15p"),
    Tip("Få fastansættelse hvis du er vikar - giver automatisk +15 point", "+15p"),
    Tip("Tag et bijob 1 dag om ugen - 5.000 kr ekstra/md = +8-12 point", "+8-12p"),
    Tip("Optimer dine fradrag - få mere udbetalt efter skat", "+5-8p"),
    Tip("Skift til højere lønnet job - 5.000 kr mere giver stor forskel", "+12-18p"),
    Tip("Bliv konsulent/freelancer - ofte højere timeløn", "+8-15p"),
    Tip("Få overtidstillæg eller weekendtillæg på dit job", "+6-10p"),
    Tip("Tag et kursus der kan øge din løn - investering der betaler sig", "+10-20p"),
    Tip("Få bil- eller telefon-goder - reducer dine udgifter", "+5-8p"),
    Tip("Forhandl bonusordning eller resultatløn på dit job", "+8-12p"),
    Tip("Sælg ting du ikke bruger - iPad, cykler, tøj på DBA", "+3-6p"),
    Tip("Start en lille side-hustle - webshop, tutoring, rengøring", "+5-12p"),
    Tip("Få pension/sundhedsforsikring via jobbet - sparer penge", "+4-7p"),
    Tip("Bliv formand i fagforening - ofte lønkompensation", "+3-5p"),
    Tip("Tag natarbejde eller skifthold - højere løn", "+8-12p"),
)

_DEBT_TIPS = (
    Tip("Sammel al gæld i ét lån med lav rente - spar 2-5% i rente", "+20-30p"),
    Tip("Indfri dit kreditkort helt - eliminér 15-25% rente med det samme", "+25-40p"),
    Tip("Forhandl lavere rente på dit banklån - ring i dag!", "+15-25p"),
    Tip("Betal 2.000 kr ekstra om måneden - du er gældfri 2-3 år hurtigere", "+10-15p"),
    Tip("Lån af familie/venner til 0% rente i stedet for banken", "+20-35p"),
    Tip("Sælg noget stort (bil, båd, motorcykel) og betal gæld af", "+30-50p"),
    Tip("Stop med at købe på kredit - betal kontant fremover", "+15-20p"),
    Tip("Flyt gæld til bank med bedre rente - sammenlign online", "+10-20p"),
    Tip("Brug skattetilbagebetaling/feriepenge til at nedbringe gæld", "+20-25p"),
    Tip("Forhandl afdragsfrihed midlertidigt for at få råd til større afbetaling", "+8-12p"),
    Tip("Tag et quicklån kun hvis du kan betale det tilbage på under 30 dage", "+5-8p"),
    Tip("Undgå dyre forbrugslån - vær kreativ med finansiering", "+15-25p"),
    Tip("Lav en gældssnebold-plan - betal mindste afdrag til alle småt gæld af først", "+12-18p"),
    Tip("Brug bonusser og lønstigninger 100% til gældsafbetaling", "+10-15p"),
    Tip("Skift kreditkort til et med 0% rente de første 12 måneder", "+8-12p"),
)

_SAVINGS_TIPS = (
    Tip("Automatiser din opsparing - 2.000 kr/md går direkte til opsparing", "+15-25p"),
    Tip("Opret nødopsparing på 50.000 kr - det giver store point med det samme", "+30-40p"),
    Tip("Brug 50/30/20 reglen - 20% af indkomst til opsparing", "+20-30p"),
    Tip("Spar alle mønter og 50-kr sedler op i en krukke", "+3-5p"),
    Tip("Sælg ting på DBA og læg pengene direkte i opsparing", "+5-10p"),
    Tip("Brug højrentekonto til din buffer - få renter mens du sparer", "+2-4p"),
    Tip("Spar dine feriepenge i stedet for at bruge dem", "+8-12p"),
    Tip("Lav en 'spar først'-regel - spar inden du betaler regninger", "+15-20p"),
    Tip("Rund op alle køb til nærmeste 10-kr og spar forskellen", "+5-8p"),
    Tip("Lav madpakke i stedet for at købe frokost - spar 100-150 kr/dag", "+12-18p"),
    Tip("Hold en no-spend weekend hver måned - spar alt du ellers ville bruge", "+6-10p"),
    Tip("Få cash-back på alle køb og læg det direkte i opsparing", "+3-6p"),
    Tip("Spar hele din skattetilbagebetaling - det er 'gratis' penge", "+10-15p"),
    Tip("Udfordring: Spar 100 kr mere hver uge - det bliver til 5.200 kr/år", "+8-12p"),
    Tip("Invester i index-fonde - lad dine penge arbejde for dig", "+10-20p"),
)

_HOUSING_TIPS = (
    Tip("Få din bolig vurderet - den er måske steget 200-500k i værdi", "+10-20p"),
    Tip("Ekstraafbetal 2.000 kr/md på dit lån - spar 100.000+ kr i rente", "+15-25p"),
    Tip("Forhandl lavere rente med banken - selv 0,2% sparer tusindvis", "+20-30p"),
    Tip("Overvej at refinansiere hvis renten er faldet", "+15-25p"),
    Tip("Udlej et værelse - 4.000 kr/md skattefri lejeindtægt", "+12-18p"),
    Tip("Renovér køkken/bad - øger boligens værdi med 100-300k", "+8-15p"),
    Tip("Skift til fast rente hvis du har variabel - mere forudsigeligt", "+5-10p"),
    Tip("Optag afdragsfrihed kortvarigt for at samle på udbetaling", "+3-8p"),
    Tip("Få energimærket forbedret - sparer penge og øger værdi", "+5-12p"),
    Tip("Lav gør-det-selv renoveringer - spar 50% på håndværker", "+8-12p"),
    Tip("Få boligadvokat til at tjekke dit lån - der kan være fejl", "+5-10p"),
    Tip("Kig på afdragsfrit lån ved refinansiering - lavere månedsydelse", "+6-12p"),
    Tip("Udnyt ROT-fradrag ved renoveringer - få penge tilbage på skatten", "+4-8p"),
    Tip("Overføre høj værdi til lavere LTV-ratio ved at nedbetale mere", "+10-20p"),
    Tip("Bliv boligejer i stedet for lejer - byg kapital i stedet for 'tab'", "+20-40p"),
)

_INSURANCE_TIPS = (
    Tip("Få indboforsikring - koster kun 100-200 kr/md og giver +33 point", "+33p"),
    Tip("Tilføj ulykkesforsikring - billig beskyttelse, stor pointgevinst", "+33p"),
    Tip("Overvej livsforsikring hvis du har familie - vigtig økonomisk sikkerhed", "+33p"),
    Tip("Saml alle forsikringer ét sted - få 10-20% rabat", "+5-8p"),
    Tip("Tjek din selvrisiko - højere selvrisiko = lavere præmie", "+3-6p"),
    Tip("Få erhvervsevne-forsikring via dit job - ofte billigere", "+15-20p"),
    Tip("Forhøj dækningen på din indboforsikring - beskyt dig bedre", "+2-5p"),
    Tip("Tilføj cykel/værdigenstande til din forsikring", "+3-6p"),
    Tip("Byt til billigere forsikringsselskab - sammenlign priser årligt", "+4-8p"),
    Tip("Få forsikring gennem A-kasse eller fagforening - ofte bedre priser", "+5-10p"),
    Tip("Tilføj retshjælpsforsikring - hjælper ved juridiske problemer", "+3-5p"),
    Tip("Få kritisk sygdom forsikring - vigtig beskyttelse", "+8-12p"),
    Tip("Overvej husforsikring i stedet for indboforsikring hvis du ejer", "+5-8p"),
    Tip("Få familieforsikring i stedet for individuelle - ofte billigere", "+6-10p"),
    Tip("Sørg for at din forsikring følger med inflationen automatisk", "+2-4p"),
)

TIP_CATALOG: Mapping[Area, TipArea] = MappingProxyType(
    {
        Area.INCOME_JOB: TipArea(icon="💰", title="Indkomst & Job", tips=_INCOME_JOB_TIPS),
        Area.DEBT: TipArea(icon="💳", title="Gæld", tips=_DEBT_TIPS),
        Area.SAVINGS: TipArea(icon="🐷", title="Opsparing", tips=_SAVINGS_TIPS),
        Area.HOUSING: TipArea(icon="🏡", title="Bolig", tips=_HOUSING_TIPS),
        Area.INSURANCE: TipArea(icon="🛡️", title="Forsikring", tips=_INSURANCE_TIPS),
    }
)


def pick_tip(area_id: int, rng: Optional[random.Random] = None) -> Optional[TipSuggestion]:
    """
    Pick one tip for an area uniformly at random.

    Not reproducible unless a seeded rng is passed. Returns None for an
    area id outside 1-5 instead of raising.
    """
    try:
        area = Area(area_id)
    except ValueError:
        logger.debug("No tips for unknown area", extra={"area_id": area_id})
        return None

    section = TIP_CATALOG[area]
    tip = (rng or random).choice(section.tips)

    return TipSuggestion(
        area=area,
        icon=section.icon,
        title=section.title,
        text=tip.text,
        boost=tip.boost,
    )
