"""Sport types offered by the UI. Stored as free text, never enforced on write."""

ALL_SPORTS = "all"

SPORT_TYPES: tuple[str, ...] = (
    "Soccer",
    "Basketball",
    "Tennis",
    "Baseball",
    "Football",
    "Hockey",
    "Golf",
    "Swimming",
    "Volleyball",
    "Cricket",
    "Rugby",
    "Boxing",
    "MMA",
    "Athletics",
    "Other",
)
