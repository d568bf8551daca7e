from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, field_validator


# -------------------------------
# Request / result
# -------------------------------
@dataclass
class TranslationRequest:
    text: str
    source_lang: str
    target_lang: str


@dataclass
class TranslationResult:
    orig: str
    trans: str
    alternatives: list[str] = field(default_factory=list)


# -------------------------------
# Wire payload (dj=1)
# -------------------------------
class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value, info):
        # the endpoint sends null for fields it has nothing for
        if value is None:
            default = cls.model_fields[info.field_name].get_default(call_default_factory=True)
            return default
        return value


class Sentence(_WireModel):
    orig: str = ""
    trans: str = ""


class DictEntry(_WireModel):
    pos: str = ""
    terms: list[str] = Field(default_factory=list)
    base_form: str = ""


class Alternative(_WireModel):
    word_postproc: str = ""


class AlternativeTranslation(_WireModel):
    alternative: list[Alternative] = Field(default_factory=list)


class RawResult(_WireModel):
    sentences: list[Sentence] = Field(default_factory=list)
    dict_entries: list[DictEntry] = Field(default_factory=list, alias="dict")
    alternative_translations: list[AlternativeTranslation] = Field(default_factory=list)
