# Namespace for pipeline steps
from .match_override import MatchOverride  # noqa: F401
from .resolve_candidates import ResolveCandidates  # noqa: F401
from .fetch_entities import FetchEntities  # noqa: F401
from .filter_people import FilterPeople  # noqa: F401
from .extract_facts import ExtractFacts  # noqa: F401
from .format_results import FormatResults  # noqa: F401
