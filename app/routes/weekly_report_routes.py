from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from typing import Any, List

from config.database import get_db
from app.dependencies.auth import get_current_user
from app.models.auth_models import User
from app.schemas.weekly_report_schema import WeeklyReportRead
from app.services import report_store
from app.services.report_validator import validate_create, validate_update
from app.utils.errors import ReportNotFound

router = APIRouter(prefix="/weekly-reports", tags=["weekly reports"])


# POST: cria relatório para o usuário logado
@router.post("", response_model=WeeklyReportRead, status_code=201)
def create_weekly_report(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    draft = validate_create(payload)
    return report_store.create_report(db, draft, current_user.id)


# GET: relatórios do usuário logado, mais recentes primeiro
@router.get("", response_model=List[WeeklyReportRead])
def list_weekly_reports(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return report_store.list_reports_by_user(db, current_user.id)


@router.get("/{report_id}", response_model=WeeklyReportRead)
def get_weekly_report(
    report_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    report = report_store.get_report_by_id(db, report_id)
    # relatório de outro usuário responde igual a inexistente
    if report.user_id != current_user.id:
        raise ReportNotFound(report_id)
    return report


# PUT: atualização parcial (só os campos enviados mudam)
@router.put("/{report_id}", response_model=WeeklyReportRead)
def update_weekly_report(
    report_id: str,
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    patch = validate_update(payload)
    return report_store.update_report(db, report_id, patch, current_user.id)


@router.delete("/{report_id}")
def delete_weekly_report(
    report_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    report_store.delete_report(db, report_id, current_user.id)
    return {"message": "Relatório semanal excluído com sucesso."}
