# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""31-question VSME bank for the ESG assessment.

Questions are organized by category, in walkthrough order:
  - Environmental (13 questions, ESRS E1-E5)
  - Social (10 questions, ESRS S1-S4)
  - Governance (8 questions, ESRS G1)

Choice options are declared most ESG-favourable first; the scoring
engine relies on that ordering.  Quantity questions name the emission
factor they feed, and ``EMISSION_DEPENDENCIES`` records which answers
re-price which quantities.
"""

from __future__ import annotations

from typing import Optional

from esg_assessment.assessment.models import AnswerType, Category, Question
from esg_assessment.emissions.factors import (
    EMISSION_FACTORS,
    RENEWABLE_SHARE_CHOICES,
    WASTE_MANAGEMENT_CHOICES,
)
from esg_assessment.emissions.models import Adjustment, EmissionDependency
from esg_assessment.errors import CatalogError, UnknownQuestionError


def _env(**kwargs) -> Question:
    return Question(category=Category.ENVIRONMENTAL, **kwargs)


def _soc(**kwargs) -> Question:
    return Question(category=Category.SOCIAL, **kwargs)


def _gov(**kwargs) -> Question:
    return Question(category=Category.GOVERNANCE, **kwargs)


CHOICE = AnswerType.MULTIPLE_CHOICE

# =========================================================================
# Environmental (13 questions)
# =========================================================================

ENVIRONMENTAL_QUESTIONS: tuple[Question, ...] = (
    # ESRS E1 - Climate change
    _env(
        id="E1_01",
        subcategory="Energia e Emissioni",
        text="L'azienda utilizza principalmente energia elettrica da fonti rinnovabili?",
        type=CHOICE,
        options=RENEWABLE_SHARE_CHOICES,
        weight=3,
        description="Valuta la transizione verso energie pulite",
    ),
    _env(
        id="E1_02",
        subcategory="Energia e Emissioni",
        text="Consumo annuale di energia elettrica (kWh)",
        type=AnswerType.CALCULATOR,
        weight=2,
        description="Inserisci il consumo per calcolare le emissioni di CO₂",
        emission_factor_key="electricity_italy",
    ),
    _env(
        id="E1_03",
        subcategory="Energia e Emissioni",
        text="Consumo annuale di gas naturale (m³)",
        type=AnswerType.CALCULATOR,
        required=False,
        weight=2,
        description="Se applicabile, per calcolare le emissioni",
        emission_factor_key="natural_gas",
    ),
    _env(
        id="E1_04",
        subcategory="Energia e Emissioni",
        text="L'azienda monitora e registra le proprie emissioni di gas serra?",
        type=CHOICE,
        options=(
            "Sì, con dettaglio Scope 1,2,3",
            "Sì, parzialmente",
            "No, ma ha intenzione di farlo",
            "No",
        ),
        weight=3,
        description="Monitoraggio delle emissioni secondo standard GHG Protocol",
    ),
    _env(
        id="E1_05",
        subcategory="Energia e Emissioni",
        text="Ha implementato misure per ridurre il consumo energetico?",
        type=CHOICE,
        options=("Sì, con obiettivi quantificati", "Sì, alcune misure", "In programma", "No"),
        weight=2,
        description="Efficienza energetica e riduzione consumi",
    ),
    # ESRS E2 - Pollution
    _env(
        id="E2_01",
        subcategory="Inquinamento e Rifiuti",
        text="L'azienda ha implementato misure per ridurre i rifiuti?",
        type=CHOICE,
        options=WASTE_MANAGEMENT_CHOICES,
        weight=2,
        description="Gestione sostenibile dei rifiuti",
    ),
    _env(
        id="E2_02",
        subcategory="Inquinamento e Rifiuti",
        text="Quantità annuale di rifiuti prodotti (kg)",
        type=AnswerType.NUMBER,
        required=False,
        weight=1,
        description="Stima dei rifiuti totali prodotti",
        emission_factor_key="waste_mixed",
    ),
    _env(
        id="E2_03",
        subcategory="Inquinamento e Rifiuti",
        text="L'azienda utilizza sostanze chimiche pericolose nei suoi processi?",
        type=CHOICE,
        options=(
            "No",
            "Sì, ma con protocolli di sicurezza rigorosi",
            "Sì, con misure di sicurezza base",
            "Non so",
        ),
        weight=2,
        description="Gestione di sostanze potenzialmente inquinanti",
    ),
    # ESRS E3 - Water and marine resources
    _env(
        id="E3_01",
        subcategory="Acqua",
        text="Consumo annuale di acqua (m³)",
        type=AnswerType.CALCULATOR,
        required=False,
        weight=1,
        description="Per calcolare l'impatto idrico e le emissioni correlate",
        emission_factor_key="water",
    ),
    _env(
        id="E3_02",
        subcategory="Acqua",
        text="L'azienda ha implementato misure per il risparmio idrico?",
        type=CHOICE,
        options=("Sì, con sistemi di recupero", "Sì, misure di efficienza", "In programma", "No"),
        weight=2,
        description="Gestione sostenibile delle risorse idriche",
    ),
    # ESRS E4 - Biodiversity
    _env(
        id="E4_01",
        subcategory="Biodiversità",
        text="L'azienda si trova in aree di particolare valore naturalistico?",
        type=CHOICE,
        options=(
            "No",
            "Sì, ma non impatta l'ambiente",
            "Sì, con misure di protezione",
            "Non so",
        ),
        weight=2,
        description="Impatto su biodiversità e ecosistemi locali",
    ),
    # ESRS E5 - Circular economy
    _env(
        id="E5_01",
        subcategory="Economia Circolare",
        text="L'azienda applica principi di economia circolare?",
        type=CHOICE,
        options=("Sì, strategia definita", "Sì, alcune iniziative", "In valutazione", "No"),
        weight=2,
        description="Riutilizzo, riciclo, riduzione sprechi",
    ),
    _env(
        id="E5_02",
        subcategory="Economia Circolare",
        text="Percentuale di materiali riciclati utilizzati nei prodotti/servizi",
        type=CHOICE,
        options=("Oltre 50%", "20-50%", "5-20%", "Meno del 5%", "Non applicabile"),
        required=False,
        weight=1,
        description="Utilizzo di materiali da fonti circolari",
    ),
)

# =========================================================================
# Social (10 questions)
# =========================================================================

SOCIAL_QUESTIONS: tuple[Question, ...] = (
    # ESRS S1 - Own workforce
    _soc(
        id="S1_01",
        subcategory="Condizioni di Lavoro",
        text="Tutti i dipendenti hanno un contratto regolare?",
        type=CHOICE,
        options=("Sì, tutti", "Sì, la maggior parte", "Parzialmente", "No"),
        weight=3,
        description="Regolarità contrattuale e diritti dei lavoratori",
    ),
    _soc(
        id="S1_02",
        subcategory="Condizioni di Lavoro",
        text="L'azienda offre programmi di formazione ai dipendenti?",
        type=CHOICE,
        options=(
            "Sì, programmi strutturati",
            "Sì, formazione occasionale",
            "Pianificati per il futuro",
            "No",
        ),
        weight=2,
        description="Sviluppo professionale e competenze",
    ),
    _soc(
        id="S1_03",
        subcategory="Sicurezza sul Lavoro",
        text="L'azienda ha implementato misure di sicurezza sul lavoro?",
        type=CHOICE,
        options=(
            "Sì, protocolli completi",
            "Sì, misure di base",
            "In fase di implementazione",
            "No",
        ),
        weight=3,
        description="Protezione salute e sicurezza lavoratori",
    ),
    _soc(
        id="S1_04",
        subcategory="Diversità e Inclusione",
        text="L'azienda promuove la diversità e l'inclusione?",
        type=CHOICE,
        options=("Sì, con politiche attive", "Sì, ma informalmente", "In via di sviluppo", "No"),
        weight=2,
        description="Parità di opportunità e non discriminazione",
    ),
    _soc(
        id="S1_05",
        subcategory="Diversità e Inclusione",
        text="Percentuale approssimativa di donne in posizioni dirigenziali",
        type=CHOICE,
        options=("Oltre 40%", "20-40%", "10-20%", "Meno del 10%", "Non applicabile/Non so"),
        required=False,
        weight=1,
        description="Equilibrio di genere nella leadership",
    ),
    # ESRS S2 - Workers in the value chain
    _soc(
        id="S2_01",
        subcategory="Catena di Fornitura",
        text="L'azienda verifica le pratiche lavorative dei suoi fornitori?",
        type=CHOICE,
        options=(
            "Sì, con audit regolari",
            "Sì, verifiche occasionali",
            "Solo per fornitori principali",
            "No",
        ),
        weight=2,
        description="Responsabilità sociale lungo la supply chain",
    ),
    # ESRS S3 - Affected communities
    _soc(
        id="S3_01",
        subcategory="Impatto Territoriale",
        text="L'azienda contribuisce allo sviluppo della comunità locale?",
        type=CHOICE,
        options=(
            "Sì, con progetti strutturati",
            "Sì, supporto occasionale",
            "In programma",
            "No",
        ),
        weight=2,
        description="Coinvolgimento e supporto al territorio",
    ),
    _soc(
        id="S3_02",
        subcategory="Impatto Territoriale",
        text="L'azienda assume prevalentemente personale locale?",
        type=CHOICE,
        options=("Sì, oltre 80%", "Sì, 50-80%", "Parzialmente", "No"),
        weight=1,
        description="Contributo all'economia locale",
    ),
    # ESRS S4 - Consumers and end-users
    _soc(
        id="S4_01",
        subcategory="Qualità e Sicurezza",
        text="L'azienda ha procedure per garantire la qualità/sicurezza dei prodotti/servizi?",
        type=CHOICE,
        options=("Sì, con certificazioni", "Sì, controlli interni", "Controlli di base", "No"),
        weight=2,
        description="Protezione e soddisfazione del cliente",
    ),
    _soc(
        id="S4_02",
        subcategory="Qualità e Sicurezza",
        text="L'azienda ha un sistema per gestire reclami e feedback dei clienti?",
        type=CHOICE,
        options=("Sì", "No"),
        weight=1,
        description="Ascolto e miglioramento continuo",
    ),
)

# =========================================================================
# Governance (8 questions)
# =========================================================================

GOVERNANCE_QUESTIONS: tuple[Question, ...] = (
    # ESRS G1 - Business conduct
    _gov(
        id="G1_01",
        subcategory="Etica e Trasparenza",
        text="L'azienda ha un codice etico o di condotta definito?",
        type=CHOICE,
        options=("Sì", "No"),
        weight=2,
        description="Principi etici e di integrità aziendale",
    ),
    _gov(
        id="G1_02",
        subcategory="Etica e Trasparenza",
        text="L'azienda ha procedure anti-corruzione?",
        type=CHOICE,
        options=(
            "Sì, procedure formali",
            "Sì, linee guida informali",
            "In sviluppo",
            "No",
        ),
        weight=2,
        description="Prevenzione corruzione e conflitti di interesse",
    ),
    _gov(
        id="G1_03",
        subcategory="Compliance",
        text="L'azienda rispetta tutte le normative applicabili?",
        type=CHOICE,
        options=(
            "Sì, con monitoraggio attivo",
            "Sì, rispetto delle principali",
            "Generalmente sì",
            "Non so",
        ),
        weight=3,
        description="Conformità normativa e legale",
    ),
    _gov(
        id="G1_04",
        subcategory="Trasparenza",
        text="L'azienda pubblica informazioni sulla propria sostenibilità?",
        type=CHOICE,
        options=(
            "Sì, report dettagliati",
            "Sì, informazioni di base",
            "Solo su richiesta",
            "No",
        ),
        weight=2,
        description="Comunicazione e accountability",
    ),
    _gov(
        id="G1_05",
        subcategory="Gestione Rischi",
        text="L'azienda ha identificato i principali rischi ESG per il suo business?",
        type=CHOICE,
        options=(
            "Sì, con piano di mitigazione",
            "Sì, identificazione di base",
            "In valutazione",
            "No",
        ),
        weight=2,
        description="Gestione proattiva dei rischi sostenibilità",
    ),
    _gov(
        id="G1_06",
        subcategory="Stakeholder",
        text="L'azienda coinvolge regolarmente gli stakeholder nelle decisioni?",
        type=CHOICE,
        options=(
            "Sì, processi strutturati",
            "Sì, consultazioni occasionali",
            "Solo stakeholder chiave",
            "No",
        ),
        weight=2,
        description="Engagement e dialogo con parti interessate",
    ),
    _gov(
        id="G1_07",
        subcategory="Governance",
        text="La governance aziendale include competenze in sostenibilità?",
        type=CHOICE,
        options=(
            "Sì, ruoli specifici",
            "Sì, come parte delle responsabilità",
            "In fase di integrazione",
            "No",
        ),
        weight=2,
        description="Integrazione ESG nella leadership",
    ),
    _gov(
        id="G1_08",
        subcategory="Privacy",
        text="L'azienda protegge adeguatamente i dati personali (GDPR)?",
        type=CHOICE,
        options=(
            "Sì, piena conformità",
            "Sì, misure di base",
            "In adeguamento",
            "Non applicabile",
        ),
        weight=2,
        description="Protezione dati e privacy",
    ),
)

# =========================================================================
# Aggregates
# =========================================================================

QUESTIONS_BY_CATEGORY: dict[Category, tuple[Question, ...]] = {
    Category.ENVIRONMENTAL: ENVIRONMENTAL_QUESTIONS,
    Category.SOCIAL: SOCIAL_QUESTIONS,
    Category.GOVERNANCE: GOVERNANCE_QUESTIONS,
}

ALL_QUESTIONS: tuple[Question, ...] = (
    ENVIRONMENTAL_QUESTIONS + SOCIAL_QUESTIONS + GOVERNANCE_QUESTIONS
)

QUESTION_MAP: dict[str, Question] = {q.id: q for q in ALL_QUESTIONS}

EMISSION_DEPENDENCIES: tuple[EmissionDependency, ...] = (
    EmissionDependency(
        trigger_id="E1_01",
        dependent_id="E1_02",
        adjustment=Adjustment.RENEWABLE_SHARE,
    ),
    EmissionDependency(
        trigger_id="E2_01",
        dependent_id="E2_02",
        adjustment=Adjustment.WASTE_MANAGEMENT,
    ),
)

DEPENDENCY_MAP: dict[str, str] = {
    d.trigger_id: d.dependent_id for d in EMISSION_DEPENDENCIES
}


def list_questions(category: Optional[Category | str] = None) -> tuple[Question, ...]:
    """Return the catalog, or one category of it, in walkthrough order."""
    if category is None:
        return ALL_QUESTIONS
    return QUESTIONS_BY_CATEGORY[Category(category)]


def get_question(question_id: str) -> Question:
    """Return the question with *question_id*.

    Raises
    ------
    UnknownQuestionError
        If *question_id* is not in the catalog.
    """
    try:
        return QUESTION_MAP[question_id]
    except KeyError:
        raise UnknownQuestionError(question_id) from None


def question_position(question_id: str) -> tuple[int, int]:
    """1-based position of a question in the full catalog, and its size."""
    question = get_question(question_id)
    return ALL_QUESTIONS.index(question) + 1, len(ALL_QUESTIONS)


def category_position(question_id: str) -> tuple[int, int]:
    """1-based position of a question within its own category."""
    question = get_question(question_id)
    questions = QUESTIONS_BY_CATEGORY[question.category]
    return questions.index(question) + 1, len(questions)


def validate_catalog(
    questions: tuple[Question, ...] = ALL_QUESTIONS,
    dependencies: tuple[EmissionDependency, ...] = EMISSION_DEPENDENCIES,
) -> dict[Category, int]:
    """Check catalog consistency and return available weight per category."""
    seen: set[str] = set()
    totals: dict[Category, int] = {c: 0 for c in Category}

    for q in questions:
        if q.id in seen:
            raise CatalogError(f"Duplicate question id '{q.id}'")
        seen.add(q.id)
        if q.type == AnswerType.MULTIPLE_CHOICE and not q.options:
            raise CatalogError(f"Choice question '{q.id}' declares no options")
        if q.emission_factor_key and q.emission_factor_key not in EMISSION_FACTORS:
            raise CatalogError(
                f"Question '{q.id}' references unknown emission factor "
                f"'{q.emission_factor_key}'"
            )
        totals[q.category] += q.weight

    for dep in dependencies:
        for qid in (dep.trigger_id, dep.dependent_id):
            if qid not in seen:
                raise CatalogError(f"Emission dependency references unknown question '{qid}'")

    return totals
