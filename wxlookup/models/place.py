"""Geographic place models."""

from dataclasses import dataclass

SYNTHETIC_PLACE_ID = 0


@dataclass(frozen=True)
class Place:
    id: int
    name: str
    latitude: float
    longitude: float
    country: str | None = None
    admin1: str | None = None
    admin2: str | None = None
    admin3: str | None = None
    admin4: str | None = None

    @property
    def label(self) -> str:
        parts = [p for p in (self.name, self.admin1, self.country) if p]
        return ", ".join(parts)

    @classmethod
    def from_api(cls, raw: dict) -> "Place":
        """Build a Place from one geocoding search result."""
        return cls(
            id=int(raw.get("id", SYNTHETIC_PLACE_ID)),
            name=str(raw["name"]),
            latitude=float(raw["latitude"]),
            longitude=float(raw["longitude"]),
            country=raw.get("country"),
            admin1=raw.get("admin1"),
            admin2=raw.get("admin2"),
            admin3=raw.get("admin3"),
            admin4=raw.get("admin4"),
        )


def synthetic_place(latitude: float, longitude: float) -> Place:
    """Place for raw coordinates: direct entry or device location."""
    return Place(
        id=SYNTHETIC_PLACE_ID,
        name=f"({latitude:.3f}, {longitude:.3f})",
        latitude=latitude,
        longitude=longitude,
    )
