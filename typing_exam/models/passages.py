from pydantic import BaseModel, Field


class Passage(BaseModel):
    id: str = Field(..., description="Dérivé du titre + instant de création (immuable)")
    title: str
    content: str
    time_minutes: int = Field(..., ge=1, description="Durée allouée en minutes")
