# app/utils/errors.py

from typing import Dict, List


class ReportValidationError(Exception):
    """Payload fora do esquema; carrega a lista de campos violados."""

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__(f"{len(errors)} campo(s) inválido(s)")


class ReportNotFound(Exception):
    """Relatório inexistente ou de outro usuário (os dois casos são indistinguíveis)."""

    def __init__(self, report_id: str):
        self.report_id = report_id
        super().__init__(f"Relatório {report_id} não encontrado")


class StorageUnavailable(Exception):
    """Falha de acesso ao banco; o chamador pode tentar novamente."""
