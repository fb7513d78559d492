from pydantic import BaseModel, ConfigDict, Field


class ConvertConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    style: str = Field(default="camel")
    content: str = Field(default="")
    log_level: str = Field(default="INFO")
    log_dir: str = Field(default="")
    raise_exception: bool = Field(default=True)
