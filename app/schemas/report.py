from pydantic import BaseModel


class BusinessDataRequest(BaseModel):
    name: str | None = None
    location: str | None = None


class BusinessReport(BaseModel):
    rating: float
    reviews: int
    headline: str


class HeadlineResponse(BaseModel):
    headline: str


class ErrorResponse(BaseModel):
    error: str
