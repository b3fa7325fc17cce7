"""
Audit trail of a calculation, as an ordered list of named steps.
"""
from __future__ import annotations

from ..models import CalculationOutcome, TraceStep
from .advancer import PublicationCascade


STEP_AVAILABILITY = "Disponibilização"
STEP_AVAILABILITY_SUSPENSIONS = "Suspensões na Disponibilização"
STEP_PUBLICATION = "Data da Publicação"
STEP_INTERVAL = "Intervalo Publicação -> Início do Prazo"
STEP_START = "Início da Contagem"
STEP_PERIOD_SUSPENSIONS = "Suspensões no Prazo"
STEP_FINAL = "Prazo Final"
STEP_PROROGATIONS = "Prorrogações"
STEP_FINAL_PROROGATED = "Prazo Final Prorrogado"


def build_trace(outcome: CalculationOutcome, cascade: PublicationCascade) -> list[TraceStep]:
    """Describe the current cascade and proven scenario step by step."""
    scenario = outcome.proven_scenario
    start = scenario.start_date or outcome.deadline_start_date
    return [
        TraceStep(STEP_AVAILABILITY, date=outcome.availability_date),
        TraceStep(STEP_AVAILABILITY_SUSPENSIONS, events=cascade.availability_suspensions),
        TraceStep(STEP_PUBLICATION, date=cascade.publication_date),
        TraceStep(STEP_INTERVAL, events=cascade.interval_suspensions),
        TraceStep(
            STEP_START,
            date=start,
            events=scenario.start_non_business_days,
        ),
        TraceStep(STEP_PERIOD_SUSPENSIONS, events=scenario.non_business_days),
        TraceStep(STEP_FINAL, date=scenario.final_date),
        TraceStep(STEP_PROROGATIONS, events=scenario.prorogated_days),
        TraceStep(STEP_FINAL_PROROGATED, date=scenario.final_date_prorogated),
    ]
