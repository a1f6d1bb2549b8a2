from .entity import WikidataEntity
from .fact_date import FactDate
from .person_model import PersonModel
from .result_model import ResultModel
from .override_entry import OverrideEntry

__all__ = [
    "WikidataEntity",
    "FactDate",
    "PersonModel",
    "ResultModel",
    "OverrideEntry",
]
