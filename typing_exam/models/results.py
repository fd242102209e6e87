from pydantic import BaseModel, Field


class TestResult(BaseModel):
    # pas une classe de test (évite la collecte pytest)
    __test__ = False

    id: str = Field(..., description="Dérivé du mobile + instant de soumission")
    user_name: str
    user_mobile: str
    passage_title: str
    wpm: int = Field(..., ge=0)
    accuracy: int = Field(..., ge=0, le=100)
    mistakes: int = Field(..., ge=0)
    timestamp: int = Field(..., description="Instant de soumission (ns depuis epoch)")
