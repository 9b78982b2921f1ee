from idmatch.matching.date import match_date
from idmatch.matching.id_number import match_id_number
from idmatch.matching.models import MatchResult, PartialDate
from idmatch.matching.name import match_name
from idmatch.matching.phone import match_phone

__all__ = [
    "MatchResult",
    "PartialDate",
    "match_date",
    "match_id_number",
    "match_name",
    "match_phone",
]
