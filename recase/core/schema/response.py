from pydantic import Field, BaseModel


class Response(BaseModel):
    answer: str = Field(default="")
    success: bool = Field(default=True)
    metadata: dict = Field(default_factory=dict)
