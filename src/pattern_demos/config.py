"""
Configuração das demonstrações de padrões
Lê variáveis de ambiente (e um .env opcional) e valida com Pydantic
"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

load_dotenv()

ESTADO_INICIAL_PADRAO = "Super-duper-super-puper-super."


class ConfiguracaoInvalidaError(ValueError):
    """Erro levantado quando alguma variável de ambiente é inválida"""


class DemoSettings(BaseModel):
    """Schema das configurações das demonstrações"""
    state_length: int = Field(30, gt=0, description="Tamanho do estado gerado pelo Originator")
    random_seed: Optional[int] = Field(None, description="Semente fixa para o gerador aleatório")
    initial_state: str = Field(ESTADO_INICIAL_PADRAO, min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "state_length": 30,
                "random_seed": 42,
                "initial_state": ESTADO_INICIAL_PADRAO
            }
        }
    )


def get_settings() -> DemoSettings:
    """Monta as configurações a partir do ambiente; variável vazia vale o padrão"""
    valores = {
        "state_length": os.getenv("DEMO_STATE_LENGTH") or "30",
        "random_seed": os.getenv("DEMO_RANDOM_SEED") or None,
        "initial_state": os.getenv("DEMO_INITIAL_STATE") or ESTADO_INICIAL_PADRAO,
    }
    try:
        return DemoSettings(**valores)
    except ValidationError as e:
        raise ConfiguracaoInvalidaError(f"Configuração inválida: {e}") from e
