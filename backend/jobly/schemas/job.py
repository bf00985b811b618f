from pydantic import BaseModel, ConfigDict, Field, field_validator

# Decimal string in [0, 1]: "0", "0.25", "1", "1.00"
EQUITY_PATTERN = r"^(0(\.\d+)?|1(\.0+)?)$"


class JobCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: str | None = Field(default=None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(BaseModel):
    # id and company_handle are rejected as unknown fields.
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: str | None = Field(default=None, pattern=EQUITY_PATTERN)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("title cannot be null")
        return v


class JobResponse(BaseModel):
    id: int
    title: str
    salary: int | None
    equity: str | None
    company_handle: str


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListResponse(BaseModel):
    jobs: list[JobResponse]


class JobDeletedResponse(BaseModel):
    deleted: int
