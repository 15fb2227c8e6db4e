from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from psdb.fields import BINARY_CHARSET, NOT_NULL_FLAG, FieldType


class GatewayModel(BaseModel):
    # The gateway speaks camelCase JSON; attributes stay snake_case.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Field(GatewayModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: FieldType = FieldType.NULL
    table: Optional[str] = None
    org_table: Optional[str] = None
    database: Optional[str] = None
    org_name: Optional[str] = None
    column_length: Optional[int] = None
    charset: Optional[int] = None
    flags: Optional[int] = None
    decimals: Optional[int] = None
    column_type: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def backfill_null_type(cls, value: Any) -> Any:
        # Zero-valued enum members are dropped from the gateway's JSON.
        return FieldType.NULL if value is None else value

    @property
    def is_binary_charset(self) -> bool:
        return self.charset == BINARY_CHARSET

    @property
    def nullable(self) -> bool:
        return not (self.flags or 0) & NOT_NULL_FLAG


class QueryResultRow(GatewayModel):
    lengths: List[str] = []
    values: Optional[str] = None


class QueryResult(GatewayModel):
    fields: List[Field] = []
    rows: List[QueryResultRow] = []
    rows_affected: Optional[int] = None
    insert_id: Optional[str] = None

    @field_validator("fields", "rows", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("insert_id", mode="before")
    @classmethod
    def insert_id_as_text(cls, value: Any) -> Any:
        # 64-bit ids stay text so they are never rounded.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class VitessError(GatewayModel):
    code: str = ""
    message: str = ""


class SessionResponse(GatewayModel):
    session: Any = None


class ExecuteResponse(GatewayModel):
    session: Any = None
    result: Optional[QueryResult] = None
    error: Optional[VitessError] = None
    timing: Optional[float] = None
