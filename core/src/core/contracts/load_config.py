from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from core.contracts.schema import DatasetSchema, FieldSchema, ValueType


class LoaderConfigRef(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key: str = Field(min_length=1)


class ModelConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str = Field(min_length=1)


class FieldConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    type: ValueType
    levels: list[str] = Field(default_factory=list)
    allow_missing: bool = False


class SchemaConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    fields: list[FieldConfig] = Field(default_factory=list)
    target: str | None = None

    @model_validator(mode="after")
    def _validate_target(self) -> SchemaConfig:
        if self.target is not None and self.target not in {f.name for f in self.fields}:
            raise ValueError(f"schema.target '{self.target}' is not a declared field")
        return self


class ModelLoadConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    loader: LoaderConfigRef
    model: ModelConfig
    schema_: SchemaConfig = Field(default_factory=SchemaConfig, alias="schema")
    params: dict[str, str] = Field(default_factory=dict)

    @field_validator("params", mode="before")
    @classmethod
    def _coerce_params_dict(cls, value: Any) -> dict[str, str]:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(k): str(v) for k, v in value.items()}
        raise ValueError("params must be a mapping")

    def to_schema(self) -> DatasetSchema:
        fields = tuple(
            FieldSchema(
                name=f.name,
                value_type=f.type,
                levels=tuple(f.levels),
                allow_missing=f.allow_missing,
            )
            for f in self.schema_.fields
        )
        target_index = None
        if self.schema_.target is not None:
            target_index = [f.name for f in fields].index(self.schema_.target)
        return DatasetSchema(fields=fields, target_index=target_index)
