from app.exceptions.custom import InvalidBusinessInputError

MISSING_INPUT_MESSAGE = "Business name and location are required"

# Picked from on the initial analysis.
REPORT_HEADLINE_TEMPLATES = (
    "Why {name} is {location}'s Best-Kept Secret in 2024",
    "{name}: The Ultimate {location} Experience You've Been Missing",
    "Discover Why {name} is Taking {location} by Storm",
    "{name} - {location}'s Premier Destination for Excellence",
    "The Complete Guide to {name}: {location}'s Hidden Gem",
    "{name} Revolutionizes the {location} Scene - Here's How",
    "Why Locals Choose {name} Over Any Other {location} Business",
    "{name}: Setting New Standards in {location} Since 2024",
    "The {name} Difference: What Makes This {location} Business Special",
    "{name} - Where Quality Meets Excellence in {location}",
)

# Picked from on "regenerate headline".
REGENERATE_HEADLINE_TEMPLATES = (
    "{name}: The {location} Success Story Everyone's Talking About",
    "How {name} Became {location}'s Most Trusted Business",
    "{name} - Redefining Excellence in {location}",
    "The {name} Phenomenon: Why {location} Can't Stop Raving",
    "{name}: Your Gateway to the Best {location} Has to Offer",
    "Breaking: {name} Wins Hearts Across {location}",
    "{name} - The {location} Business That's Changing Everything",
    "Why {name} is {location}'s Rising Star in 2024",
    "{name}: Where Innovation Meets Tradition in {location}",
    "The {name} Revolution: Transforming {location} One Customer at a Time",
    "{name} - {location}'s Answer to Quality and Service",
    "Exclusive: How {name} Conquered the {location} Market",
    "{name}: The {location} Destination That Exceeds Expectations",
    "Why Smart {location} Residents Choose {name} Every Time",
    "{name} - Building Tomorrow's {location} Today",
    "The Ultimate {name} Experience: {location}'s Best-Kept Secret Revealed",
    "{name}: Leading the Charge in {location}'s Business Renaissance",
    "How {name} is Putting {location} on the Map",
    "{name} - Where {location} Dreams Come True",
    "The {name} Advantage: What Sets This {location} Business Apart",
)


def render_headline(template: str, name: str, location: str) -> str:
    return template.format(name=name, location=location)


def normalize_business_input(
    name: str | None, location: str | None
) -> tuple[str, str]:
    """Trim both inputs and reject any that end up empty."""
    clean_name = (name or "").strip()
    clean_location = (location or "").strip()

    missing = []
    if not clean_name:
        missing.append("name")
    if not clean_location:
        missing.append("location")
    if missing:
        raise InvalidBusinessInputError(MISSING_INPUT_MESSAGE, fields=missing)

    return clean_name, clean_location
