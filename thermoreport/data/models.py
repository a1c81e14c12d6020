"""
thermoreport/data/models.py
───────────────────────────
Pydantic v2 models for the report API payload.

Wire keys are the upstream Portuguese names (``relatorio``, ``termografias``,
``localizacao`` …) and are mapped to English attribute names through aliases.
All models are frozen: a payload is read-only for the whole render.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

_PAYLOAD_CONFIG = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class Party(BaseModel):
    """Client, responsible user, or approver record."""

    model_config = _PAYLOAD_CONFIG

    name: str | None = Field(default=None, alias="nome")
    city: str | None = Field(default=None, alias="cidade")
    state: str | None = Field(default=None, alias="estado")
    logo: str | None = None
    contact_person: str | None = Field(default=None, alias="pessoa_contato")
    contact_department: str | None = Field(default=None, alias="departamento_contato")
    department: str | None = Field(default=None, alias="departamento")
    email: str | None = None
    phone: str | None = Field(default=None, alias="telefone")


class ThermographyReading(BaseModel):
    model_config = _PAYLOAD_CONFIG

    id: int | str | None = None
    location: str = Field(default="", alias="localizacao")
    tag: str = ""
    sector: str = Field(default="", alias="setor")
    status: str = ""
    component: str | None = Field(default=None, alias="componente")
    measured_temp: float | str | None = Field(default=None, alias="temp_aquecimento")
    admissible_temp: float | str | None = Field(default=None, alias="temp_admissivel")
    problem: str | None = Field(default=None, alias="descricao_problema")
    observation: str | None = Field(default=None, alias="observacao")
    recommendation: str | None = Field(default=None, alias="recomendacao")
    thermal_image: str | None = Field(default=None, alias="foto_painel")
    visible_image: str | None = Field(default=None, alias="foto_camera")

    @field_validator("location", "tag", "sector", "status", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return "" if value is None else value


class ReportRecord(BaseModel):
    model_config = _PAYLOAD_CONFIG

    id: int | str | None = None
    revision: int | str | None = Field(default=None, alias="num_revisao")
    executed_at: str | None = Field(default=None, alias="dataExe")
    execution_date: str | None = Field(default=None, alias="data_execucao")
    execution_date_alt: str | None = Field(default=None, alias="data_Execucao")
    inspection_type: str | None = Field(default=None, alias="tipo")
    client: Party | None = Field(default=None, alias="cliente")
    user: Party | None = Field(default=None, alias="usuario")
    approver: Party | None = Field(default=None, alias="aprovador")


class ReportPayload(BaseModel):
    """Full API response for one report."""

    model_config = _PAYLOAD_CONFIG

    report: ReportRecord = Field(alias="relatorio")
    client: Party | None = Field(default=None, alias="cliente")
    user: Party | None = Field(default=None, alias="usuario")
    approver: Party | None = Field(default=None, alias="aprovador")
    readings: tuple[ThermographyReading, ...] = Field(default=(), alias="termografias")

    @field_validator("readings", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return () if value is None else value
