import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from config.database import init_db
from config.settings import CORS_ORIGINS, LOG_LEVEL

from app.api.endpoints.auth_user import router as auth_user_routes
from app.routes.weekly_report_routes import router as weekly_report_routes
from app.middlewares.error_handler import add_error_handlers

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


# Cria a instância do FastAPI
app = FastAPI(
    title="Suivi Hebdomadaire API",
    version="0.1.0",
    description="Backend para relatórios semanais de observação de alunos com necessidades educativas especiais",
    lifespan=lifespan,
)

# Configura CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Respostas de erro padronizadas (validação, não encontrado, banco fora)
add_error_handlers(app)

# Cria o roteador principal com prefixo /api
routerAPI = APIRouter(prefix="/api")

routerAPI.include_router(auth_user_routes)
routerAPI.include_router(weekly_report_routes)
# Anexa o roteador à aplicação principal
app.include_router(routerAPI)


@app.get("/", tags=["Root"])
async def read_root():
    return {"status": "Suivi Hebdomadaire API está no ar!"}
