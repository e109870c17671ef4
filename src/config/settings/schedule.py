"""Settings do calendario de releases (upstream ICS) e da resposta HTTP.

Toda a configuracao constante do handler (allow-list de versoes, versao
padrao, summary alvo, CORS) vive aqui como estrutura imutavel.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

VersionPolicy = Literal["lenient", "strict"]

DEFAULT_ALLOWED_VERSIONS = ("f-39", "f-40", "f-41", "f-42", "f-43")
DEFAULT_UPSTREAM_BASE_URL = "https://fedorapeople.org"
DEFAULT_UPSTREAM_PATH_TEMPLATE = "/groups/schedule/{version}/{version}-key.ics"
DEFAULT_TARGET_SUMMARY = "Current Final Target date"
ONE_DAY_SECONDS = 86400


class ScheduleSettings(BaseModel):
    """Configuracoes do proxy de datas de release."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    upstream_base_url: str = Field(
        default=DEFAULT_UPSTREAM_BASE_URL,
        description="Scheme + host do servidor que publica os calendarios.",
    )
    upstream_path_template: str = Field(
        default=DEFAULT_UPSTREAM_PATH_TEMPLATE,
        description="Path do recurso ICS; {version} e substituido pelo token.",
    )
    allowed_versions: tuple[str, ...] = Field(
        default=DEFAULT_ALLOWED_VERSIONS,
        description="Allow-list fechada de tokens de versao.",
    )
    default_version: str = Field(
        default="f-41",
        description="Versao usada quando o parametro falta ou e invalido (lenient).",
    )
    version_policy: VersionPolicy = Field(
        default="lenient",
        description="lenient substitui pelo default; strict responde 400.",
    )
    target_summary: str = Field(
        default=DEFAULT_TARGET_SUMMARY,
        description="Summary do evento cuja data de inicio e extraida.",
    )
    request_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        le=30,
        description="Timeout total da chamada ao upstream.",
    )
    rewrite_origin: bool = Field(
        default=True,
        description="Reescreve o header Origin para a origem do proprio upstream.",
    )
    cache_max_age_seconds: int = Field(
        default=ONE_DAY_SECONDS,
        ge=0,
        description="max-age do Cache-Control em respostas 200; 0 omite o header.",
    )
    cors_allow_origin: str = Field(
        default="*",
        description="Valor de Access-Control-Allow-Origin.",
    )
    cors_max_age_seconds: int = Field(
        default=ONE_DAY_SECONDS,
        ge=0,
        description="Valor de Access-Control-Max-Age em preflight.",
    )

    @property
    def allowed_methods(self) -> tuple[str, ...]:
        """Metodos HTTP atendidos pelo endpoint."""
        return ("GET", "OPTIONS")

    @property
    def upstream_origin(self) -> str:
        """Origem (scheme://host) do upstream, usada no rewrite de Origin."""
        parts = urlsplit(self.upstream_base_url)
        return f"{parts.scheme}://{parts.netloc}"

    def build_upstream_url(self, version: str) -> str:
        """Monta a URL do calendario para um token ja validado."""
        path = self.upstream_path_template.format(version=version)
        return f"{self.upstream_base_url.rstrip('/')}{path}"

    def config_errors(self) -> list[str]:
        """Valida consistencia da configuracao.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.allowed_versions:
            errors.append("ALLOWED_VERSIONS nao pode ser vazio")
        elif self.default_version not in self.allowed_versions:
            errors.append(
                f"DEFAULT_VERSION {self.default_version} fora de ALLOWED_VERSIONS"
            )

        if "{version}" not in self.upstream_path_template:
            errors.append("UPSTREAM_PATH_TEMPLATE deve conter {version}")

        if urlsplit(self.upstream_base_url).scheme != "https":
            errors.append("UPSTREAM_BASE_URL deve usar https")

        if not self.target_summary:
            errors.append("TARGET_SUMMARY nao pode ser vazio")

        return errors


def _parse_bool(value: str) -> bool:
    """Converte texto de env em bool."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_versions(value: str | None) -> tuple[str, ...]:
    """Converte lista separada por virgula, ignorando itens vazios."""
    if value is None:
        return DEFAULT_ALLOWED_VERSIONS
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _parse_policy(value: str) -> VersionPolicy:
    return "strict" if value.strip().lower() == "strict" else "lenient"


def _load_schedule_from_env() -> ScheduleSettings:
    """Carrega ScheduleSettings a partir de variaveis de ambiente."""
    return ScheduleSettings(
        upstream_base_url=os.getenv("UPSTREAM_BASE_URL", DEFAULT_UPSTREAM_BASE_URL),
        upstream_path_template=os.getenv(
            "UPSTREAM_PATH_TEMPLATE", DEFAULT_UPSTREAM_PATH_TEMPLATE
        ),
        allowed_versions=_parse_versions(os.getenv("ALLOWED_VERSIONS")),
        default_version=os.getenv("DEFAULT_VERSION", "f-41"),
        version_policy=_parse_policy(os.getenv("VERSION_POLICY", "lenient")),
        target_summary=os.getenv("TARGET_SUMMARY", DEFAULT_TARGET_SUMMARY),
        request_timeout_seconds=float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "5")),
        rewrite_origin=_parse_bool(os.getenv("UPSTREAM_REWRITE_ORIGIN", "true")),
        cache_max_age_seconds=int(os.getenv("CACHE_MAX_AGE_SECONDS", str(ONE_DAY_SECONDS))),
        cors_allow_origin=os.getenv("CORS_ALLOW_ORIGIN", "*"),
        cors_max_age_seconds=int(os.getenv("CORS_MAX_AGE_SECONDS", str(ONE_DAY_SECONDS))),
    )


@lru_cache(maxsize=1)
def get_schedule_settings() -> ScheduleSettings:
    """Retorna instancia cacheada de ScheduleSettings."""
    return _load_schedule_from_env()


__all__ = ["ScheduleSettings", "VersionPolicy", "get_schedule_settings"]
