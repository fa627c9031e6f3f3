# app/services/report_store.py

import logging
from contextlib import contextmanager
from datetime import timedelta
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.weekly_report_model import WeeklyReport
from app.schemas.weekly_report_schema import WeeklyReportCreate, WeeklyReportUpdate
from app.services.report_validator import week_order_errors
from app.utils.clock import utcnow
from app.utils.errors import ReportNotFound, ReportValidationError, StorageUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def storage_guard(db: Session, action: str):
    """Converte falhas do SQLAlchemy em StorageUnavailable, desfazendo a transação."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Falha no banco ao %s", action)
        raise StorageUnavailable(f"Banco de dados indisponível ao {action}") from exc


def _owned_report(db: Session, report_id: str, owner_user_id: str) -> WeeklyReport:
    # dono diferente é tratado como inexistente
    report = db.query(WeeklyReport).filter_by(id=report_id, user_id=owner_user_id).first()
    if report is None:
        raise ReportNotFound(report_id)
    return report


def create_report(db: Session, draft: WeeklyReportCreate, owner_user_id: str) -> WeeklyReport:
    now = utcnow()
    report = WeeklyReport(
        **draft.model_dump(),
        user_id=owner_user_id,
        created_at=now,
        updated_at=now,
    )
    with storage_guard(db, "criar relatório"):
        db.add(report)
        db.commit()
        db.refresh(report)

    logger.info("Relatório %s criado por %s", report.id, owner_user_id)
    return report


def list_reports_by_user(db: Session, owner_user_id: str) -> List[WeeklyReport]:
    with storage_guard(db, "listar relatórios"):
        return (
            db.query(WeeklyReport)
            .filter(WeeklyReport.user_id == owner_user_id)
            .order_by(WeeklyReport.created_at.desc())
            .all()
        )


def get_report_by_id(db: Session, report_id: str) -> WeeklyReport:
    """Busca por id sem checar o dono; quem precisa de controle de acesso compara user_id."""
    with storage_guard(db, "buscar relatório"):
        report = db.get(WeeklyReport, report_id)
    if report is None:
        raise ReportNotFound(report_id)
    return report


def update_report(
    db: Session,
    report_id: str,
    patch: WeeklyReportUpdate,
    owner_user_id: str,
) -> WeeklyReport:
    with storage_guard(db, "atualizar relatório"):
        report = _owned_report(db, report_id, owner_user_id)

        changes = patch.changes()

        # o intervalo da semana é revalidado contra o que já está salvo
        errors = week_order_errors(
            changes.get("week_start_date", report.week_start_date),
            changes.get("week_end_date", report.week_end_date),
        )
        if errors:
            raise ReportValidationError(errors)

        for key, value in changes.items():
            setattr(report, key, value)

        now = utcnow()
        if report.updated_at is not None and now <= report.updated_at:
            now = report.updated_at + timedelta(microseconds=1)
        report.updated_at = now

        db.commit()
        db.refresh(report)

    logger.info("Relatório %s atualizado (%s)", report_id, ", ".join(sorted(changes)) or "sem campos")
    return report


def delete_report(db: Session, report_id: str, owner_user_id: str) -> None:
    with storage_guard(db, "excluir relatório"):
        report = _owned_report(db, report_id, owner_user_id)
        db.delete(report)
        db.commit()

    logger.info("Relatório %s excluído por %s", report_id, owner_user_id)
