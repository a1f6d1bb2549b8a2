from __future__ import annotations

from models.fact_date import FactDate
from models.override_entry import OverrideEntry
from models.person_model import PersonModel


# Central override table. Edit here to pin answers for specific search terms.
# Entries are checked in order; the first entry with a matching alias wins.
# Aliases must be lower-case: incoming search terms are lower-cased before matching.
# Set OVERRIDES_PATH to a JSON file to replace this table without a code change.
OVERRIDES: tuple[OverrideEntry, ...] = (
    OverrideEntry(
        aliases=("dead or alive", "deadoralivebot", "@deadoralivebot"),
        person=PersonModel(
            name="Dead or Alive",
            custom_message="I'm a bot, so I'm neither dead nor alive. I'm just online.",
        ),
    ),
    OverrideEntry(
        aliases=("the queen", "queen elizabeth", "queen elizabeth ii"),
        person=PersonModel(
            name="Elizabeth II",
            date_of_birth=FactDate(year=1926, month=4, day=21),
            date_of_death=FactDate(year=2022, month=9, day=8),
            url="https://en.wikipedia.org/wiki/Elizabeth_II",
        ),
    ),
    OverrideEntry(
        aliases="elvis",
        person=PersonModel(
            name="Elvis Presley",
            custom_message=(
                "[Elvis Presley](https://en.wikipedia.org/wiki/Elvis_Presley) "
                "left the building on August 16th 1977."
            ),
        ),
    ),
)
