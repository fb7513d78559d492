from typing import Any

from pydantic import Field, BaseModel, ConfigDict

from ..enumeration import CaseStyle


class ConvertRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    # validated by the converter itself so non-str input surfaces as InvalidArgumentError
    content: Any = Field(default="")
    style: CaseStyle = Field(default=CaseStyle.CAMEL)
