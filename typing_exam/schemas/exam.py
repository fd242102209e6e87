from pydantic import BaseModel, Field


# -------------------
# Passages
# -------------------
class PassageIn(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=20000)
    time_minutes: int = Field(ge=1, le=120, description="Durée allouée en minutes")


class PassageCreatedOut(BaseModel):
    id: str


# -------------------
# Résultats
# -------------------
class ResultIn(BaseModel):
    user_name: str = Field(min_length=1, max_length=120)
    user_mobile: str = Field(min_length=1, max_length=20)
    passage_title: str = Field(min_length=1, max_length=200)
    wpm: int = Field(ge=0)
    accuracy: int = Field(ge=0, le=100)
    mistakes: int = Field(ge=0)


class ResultCreatedOut(BaseModel):
    id: str
