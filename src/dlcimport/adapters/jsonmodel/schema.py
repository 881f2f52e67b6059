"""Pydantic models describing the JSONModel payloads written to the import batch."""

from __future__ import annotations

from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

NoteType = Literal["scopecontent", "processinfo"]


class JsonModelBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class RefPayload(JsonModelBase):
    ref: str


class LinkedAgentPayload(JsonModelBase):
    role: str
    ref: str


class DatePayload(JsonModelBase):
    date_type: Literal["single", "inclusive"]
    label: str
    begin: str
    end: str | None = None
    expression: str


class ExtentPayload(JsonModelBase):
    portion: Literal["whole", "part"]
    extent_type: str
    container_summary: str | None = None
    number: str

    @field_validator("number")
    @classmethod
    def _require_count(cls, value: str) -> str:
        if not value.isdigit():
            raise ValueError(f"extent number must be a count, got {value!r}")
        return value


class UserDefinedPayload(JsonModelBase):
    integer_2: str


class NoteTextPayload(JsonModelBase):
    jsonmodel_type: Literal["note_text"] = "note_text"
    content: str


class NoteMultipartPayload(JsonModelBase):
    jsonmodel_type: Literal["note_multipart"] = "note_multipart"
    type: NoteType
    subnotes: list[NoteTextPayload]


class InstancePayload(JsonModelBase):
    instance_type: Literal["digital_object"] = "digital_object"
    digital_object: RefPayload


class LanguageAndScriptPayload(JsonModelBase):
    language: str
    script: str


class LangMaterialPayload(JsonModelBase):
    language_and_script: LanguageAndScriptPayload


class ResourcePayload(JsonModelBase):
    jsonmodel_type: Literal["resource"] = "resource"
    uri: str
    id_0: str | None = None
    title: str | None = None
    level: Literal["collection"] = "collection"
    extents: list[ExtentPayload] = Field(min_length=1)
    dates: list[DatePayload] = Field(default_factory=list)
    linked_agents: list[LinkedAgentPayload] = Field(default_factory=list)
    user_defined: UserDefinedPayload | None = None
    finding_aid_language: str
    finding_aid_script: str
    lang_materials: list[LangMaterialPayload] = Field(default_factory=list)


class ArchivalObjectPayload(JsonModelBase):
    jsonmodel_type: Literal["archival_object"] = "archival_object"
    uri: str
    title: str | None = None
    component_id: str | None = None
    level: Literal["item"] = "item"
    dates: list[DatePayload] = Field(default_factory=list)
    extents: list[ExtentPayload] = Field(min_length=1)
    instances: list[InstancePayload] = Field(default_factory=list)
    notes: list[NoteMultipartPayload] = Field(default_factory=list)
    linked_agents: list[LinkedAgentPayload] = Field(default_factory=list)
    resource: RefPayload


class AgentNamePayload(JsonModelBase):
    primary_name: str
    sort_name_auto_generate: bool = True
    name_order: Literal["inverted", "direct"] = "inverted"
    source: str = "local"


class AgentPersonPayload(JsonModelBase):
    jsonmodel_type: Literal["agent_person"] = "agent_person"
    uri: str
    names: list[AgentNamePayload] = Field(min_length=1)


class DigitalObjectPayload(JsonModelBase):
    jsonmodel_type: Literal["digital_object"] = "digital_object"
    uri: str
    digital_object_id: str
    title: str | None = None
    linked_agents: list[LinkedAgentPayload] = Field(default_factory=list)
    user_defined: UserDefinedPayload | None = None


RecordPayload: TypeAlias = (
    ResourcePayload | ArchivalObjectPayload | AgentPersonPayload | DigitalObjectPayload
)
