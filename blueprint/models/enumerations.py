from enum import Enum

class ReadinessTier(str, Enum):
    HIGH = "High Readiness"
    MODERATE = "Moderate Readiness"
    EARLY = "Early Stage"
    NOT_YET = "Not Yet Ready"

class RecommendationLevel(str, Enum):
    HIGH = "high"
    MID = "mid"
    LOW = "low"

class ScoreBand(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"

class FlowStep(str, Enum):
    LANDING = "landing"
    ASSESSMENT = "assessment"
    GATE = "gate"            # Payment screen, bypassed
    CAPTURE = "capture"
    RESULTS = "results"
