from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class MessageType(str, Enum):
    """Speaker of a transcript entry."""

    USER = "user"
    ASSISTANT = "assistant"
    ERROR = "error"


class _WireModel(BaseModel):
    """Base for payloads exchanged with the analytics API (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Series(_WireModel):
    """One plotted series of a bar or line chart.

    Attributes:
        data_key: Record key holding the series values.
        color: Optional CSS color; a random one is picked when missing.
        name: Optional legend label (defaults to data_key).
    """

    data_key: str
    color: str | None = None
    name: str | None = None


class Visualization(_WireModel):
    """Server-provided description of a chart to render.

    ``type`` is kept as a plain string so unknown chart kinds still parse;
    they simply render nothing.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    title: str = ""
    data: list[dict[str, Any]] = Field(default_factory=list)
    x_axis: str | None = None
    series: list[Series] = Field(default_factory=list)
    value_key: str | None = None
    name_key: str | None = None
    colors: list[str | None] | None = None

    @field_validator("title", mode="before")
    @classmethod
    def null_title(cls, v: Any) -> Any:
        """Treat a null title as untitled."""
        return v or ""

    @field_validator("data", "series", mode="before")
    @classmethod
    def null_lists(cls, v: Any) -> Any:
        """Treat null data or series as empty."""
        return v or []


class TableResult(_WireModel):
    """Tabular query result.

    Attributes:
        columns: Ordered column names.
        rows: Records keyed by column name.
    """

    columns: list[str] = Field(default_factory=list)
    rows: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("columns", "rows", mode="before")
    @classmethod
    def null_lists(cls, v: Any) -> Any:
        """Treat null columns or rows as empty; the table is then not shown."""
        return v or []

    @property
    def has_rows(self) -> bool:
        return bool(self.columns) and bool(self.rows)


class QueryResponse(_WireModel):
    """Body returned by the analytics API."""

    text: str | None = None
    visualizations: list[Visualization] = Field(default_factory=list)
    sql_query: str | None = None
    table_data: TableResult | None = None

    @field_validator("visualizations", mode="before")
    @classmethod
    def null_visualizations(cls, v: Any) -> Any:
        """Treat null visualizations as none."""
        return v or []


class Message(_WireModel):
    """A single transcript entry. Immutable once built.

    Attributes:
        type: user, assistant or error.
        content: Message text.
        visualizations: Charts attached to an assistant answer.
        sql_query: SQL generated for the answer, if any.
        table_data: Raw query result, if any.
    """

    model_config = ConfigDict(frozen=True)

    type: MessageType
    content: str
    visualizations: list[Visualization] = Field(default_factory=list)
    sql_query: str | None = None
    table_data: TableResult | None = None

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(type=MessageType.USER, content=content)

    @classmethod
    def error(cls, content: str) -> "Message":
        return cls(type=MessageType.ERROR, content=content)

    @classmethod
    def from_response(cls, response: QueryResponse) -> "Message":
        """Build the assistant entry for an API response."""
        return cls(
            type=MessageType.ASSISTANT,
            content=response.text or "",
            visualizations=response.visualizations,
            sql_query=response.sql_query,
            table_data=response.table_data,
        )


class QueryRequest(_WireModel):
    """Request payload for the analytics API.

    Attributes:
        query: The user's question.
        history: Transcript entries preceding the question.
    """

    query: str = Field(..., min_length=1)
    history: list[Message] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to JSON-compatible dict using wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
