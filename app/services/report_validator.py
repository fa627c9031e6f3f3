# app/services/report_validator.py
"""
Validação dos payloads de relatório semanal vindos do formulário.

Toda normalização (padrões das competências, dias da semana, status antigos)
acontece aqui, uma única vez; o que chega ao banco já é um registro completo.
"""

from typing import Any, Dict, List

from pydantic import ValidationError

from app.schemas.weekly_report_schema import (
    WeeklyReportCreate,
    WeeklyReportUpdate,
    parse_iso_date,
)
from app.utils.errors import ReportValidationError

WEEK_ORDER_MESSAGE = "weekEndDate não pode ser anterior a weekStartDate"


def _field_errors(exc: ValidationError) -> List[Dict[str, str]]:
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "__root__"
        errors.append({"field": field, "message": err["msg"]})
    return errors


def week_order_errors(start, end) -> List[Dict[str, str]]:
    start, end = parse_iso_date(start), parse_iso_date(end)
    if start is not None and end is not None and start > end:
        return [{"field": "weekEndDate", "message": WEEK_ORDER_MESSAGE}]
    return []


def _validate(model, payload: Any):
    if not isinstance(payload, dict):
        raise ReportValidationError(
            [{"field": "__root__", "message": "o corpo da requisição deve ser um objeto JSON"}]
        )

    # ordem das datas é checada à parte para aparecer junto com os demais erros
    errors = week_order_errors(payload.get("weekStartDate"), payload.get("weekEndDate"))
    try:
        validated = model.model_validate(payload)
    except ValidationError as exc:
        raise ReportValidationError(_field_errors(exc) + errors) from exc

    if errors:
        raise ReportValidationError(errors)
    return validated


def validate_create(payload: Any) -> WeeklyReportCreate:
    """Payload completo -> rascunho (sem userId, que vem do usuário autenticado)."""
    return _validate(WeeklyReportCreate, payload)


def validate_update(payload: Any) -> WeeklyReportUpdate:
    """Payload parcial -> patch; campos ausentes permanecem inalterados."""
    return _validate(WeeklyReportUpdate, payload)
