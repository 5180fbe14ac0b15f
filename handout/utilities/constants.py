from typing import Final

DRAFT_KEY: Final[str] = "handoutDraft"
DEFAULT_DATE_FORMAT: Final[str] = "%m/%d/%Y"

# Built-in catalog used whenever data/medications.json cannot be loaded
DEFAULT_MEDS: Final[list[dict]] = [
    {
        "name": "Amoxicillin 500 mg",
        "image": "images/amoxicillin-500.png",
        "aliases": ["Amox 500", "Amoxicillin"],
    },
    {
        "name": "Ibuprofen 200 mg",
        "image": "images/ibuprofen-200.png",
        "aliases": ["Advil 200", "Motrin 200", "Ibuprofen"],
    },
    {
        "name": "Metformin 500 mg",
        "image": "images/metformin-500.png",
        "aliases": ["Glucophage 500", "Metformin"],
    },
]

NO_SELECTION_MESSAGE: Final[str] = "Please select a medication first."
EMPTY_FIELDS_MESSAGE: Final[str] = (
    "Please add at least directions, instructions, or notes before adding the medication."
)
PRINT_EMPTY_CONFIRM_MESSAGE: Final[str] = "No medications in treatment plan. Print anyway?"
EMPTY_LIST_MESSAGE: Final[str] = (
    'No medications added yet. Select a medication above and click "Add Medication to Plan".'
)
EMPTY_HANDOUT_MESSAGE: Final[str] = "Add medications to see your treatment plan here."
