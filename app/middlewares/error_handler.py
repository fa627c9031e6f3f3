# app/middlewares/error_handler.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.utils.errors import ReportNotFound, ReportValidationError, StorageUnavailable


def add_error_handlers(app: FastAPI):
    @app.exception_handler(ReportValidationError)
    async def report_validation_handler(request: Request, exc: ReportValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Dados inválidos.", "errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # corpo JSON malformado ou parâmetros de rota inválidos
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={"message": "Dados inválidos.", "errors": errors},
        )

    @app.exception_handler(ReportNotFound)
    async def not_found_handler(request: Request, exc: ReportNotFound):
        return JSONResponse(
            status_code=404,
            content={"message": "Relatório semanal não encontrado."},
        )

    @app.exception_handler(StorageUnavailable)
    async def storage_handler(request: Request, exc: StorageUnavailable):
        return JSONResponse(
            status_code=503,
            content={"message": "Serviço temporariamente indisponível. Tente novamente."},
        )
