from pydantic import BaseModel


class ImagesResponse(BaseModel):
    images: list[str]


class HealthResponse(BaseModel):
    status: str
    app: str


OUTCOME_HEADER = "X-Extraction-Outcome"
