"""Static synonym tables used for query expansion.

Keys and synonyms are lower-case. A synonym may be a multi-word phrase;
phrases never hit the token index exactly but still match through the
fuzzy and raw-substring fallbacks.

Both tables are exposed read-only so they can be shared by reference
across every index and request in the process.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple


def _freeze(table: Dict[str, Tuple[str, ...]]) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({k.lower(): tuple(s.lower() for s in v) for k, v in table.items()})


JOB_TITLE_SYNONYMS: Mapping[str, Tuple[str, ...]] = _freeze(
    {
        # education
        "teacher": ("tutor", "educator", "instructor", "lecturer", "trainer"),
        "lecturer": ("professor", "academic", "tutor"),
        # healthcare
        "nurse": ("nursing officer", "midwife", "caregiver", "health worker"),
        "doctor": ("physician", "medical officer", "clinical officer"),
        "pharmacist": ("dispenser", "pharmacy technician"),
        # sales / business
        "sales": ("salesperson", "sales executive", "sales representative", "sales agent"),
        "salesperson": ("sales executive", "sales representative", "sales girl", "sales associate"),
        "marketer": ("marketing officer", "marketing executive", "digital marketer"),
        "accountant": ("accounts officer", "bookkeeper", "auditor", "accounting clerk"),
        "cashier": ("teller", "till operator"),
        # office
        "secretary": ("receptionist", "administrator", "office assistant", "clerk"),
        "administrator": ("admin officer", "office manager", "secretary"),
        "recruiter": ("hr officer", "talent acquisition", "recruitment officer"),
        # technology
        "developer": ("programmer", "software engineer", "coder"),
        "programmer": ("developer", "coder"),
        "technician": ("it technician", "helpdesk", "support officer"),
        # transport / logistics
        "driver": ("chauffeur", "delivery driver", "dispatch rider", "bus driver"),
        "storekeeper": ("warehouse officer", "store keeper", "inventory clerk"),
        # trades
        "electrician": ("wireman", "electrical technician"),
        "plumber": ("pipefitter",),
        "carpenter": ("joiner", "woodworker"),
        "mechanic": ("fitter", "auto technician"),
        "mason": ("bricklayer",),
        "welder": ("fabricator",),
        "tailor": ("seamstress", "dressmaker", "fashion designer"),
        "hairdresser": ("stylist", "barber", "beautician"),
        # hospitality / services
        "cook": ("chef", "caterer", "kitchen assistant"),
        "chef": ("cook", "caterer"),
        "waiter": ("waitress", "server", "steward"),
        "cleaner": ("housekeeper", "janitor", "maid", "cleaning staff"),
        "nanny": ("babysitter", "childminder", "au pair"),
        "security": ("guard", "watchman", "security officer"),
        "guard": ("watchman", "security officer"),
        "farmer": ("agriculturist", "farm hand"),
    }
)

SKILL_SYNONYMS: Mapping[str, Tuple[str, ...]] = _freeze(
    {
        "excel": ("spreadsheet", "spreadsheets", "microsoft excel"),
        "word": ("microsoft word", "word processing"),
        "computer": ("ict", "computing", "it"),
        "typing": ("data entry", "keyboarding"),
        "accounting": ("bookkeeping", "accounts", "quickbooks"),
        "teaching": ("tutoring", "lesson planning", "classroom management"),
        "driving": ("license", "licence"),
        "communication": ("interpersonal", "customer service", "public speaking"),
        "leadership": ("supervision", "management", "team lead"),
        "cooking": ("catering", "baking", "food preparation"),
        "sewing": ("tailoring", "dressmaking"),
        "python": ("django", "flask", "pandas"),
        "javascript": ("js", "react", "node"),
        "marketing": ("advertising", "social media", "branding"),
        "nursing": ("patient care", "first aid", "caregiving"),
        "photography": ("photo editing", "videography"),
        "graphics": ("graphic design", "photoshop", "illustrator"),
    }
)
