"""WMO weather interpretation codes used by Open-Meteo."""

UNKNOWN_EMOJI = "❓"

WMO_CODES: dict[int, tuple[str, str]] = {
    0: ("Clear sky", "☀️"),
    1: ("Mainly clear", "🌤️"),
    2: ("Partly cloudy", "⛅"),
    3: ("Overcast", "☁️"),
    45: ("Fog", "🌫️"),
    48: ("Depositing rime fog", "🌫️"),
    51: ("Light drizzle", "🌦️"),
    53: ("Moderate drizzle", "🌦️"),
    55: ("Dense drizzle", "🌧️"),
    56: ("Light freezing drizzle", "🌧️🥶"),
    57: ("Dense freezing drizzle", "🌧️🥶"),
    61: ("Slight rain", "🌦️"),
    63: ("Moderate rain", "🌧️"),
    65: ("Heavy rain", "🌧️"),
    66: ("Light freezing rain", "🌧️🥶"),
    67: ("Heavy freezing rain", "🌧️🥶"),
    71: ("Slight snow", "🌨️"),
    73: ("Moderate snow", "🌨️"),
    75: ("Heavy snow", "❄️"),
    77: ("Snow grains", "🌨️"),
    80: ("Rain showers (slight)", "🌦️"),
    81: ("Rain showers (moderate)", "🌧️"),
    82: ("Rain showers (violent)", "⛈️"),
    85: ("Snow showers (slight)", "🌨️"),
    86: ("Snow showers (heavy)", "❄️"),
    95: ("Thunderstorm", "⛈️"),
    96: ("Thunderstorm w/ slight hail", "⛈️🧊"),
    99: ("Thunderstorm w/ heavy hail", "⛈️🧊"),
}


def code_to_label(code: int | None) -> str:
    if code is None:
        return "Unknown"
    entry = WMO_CODES.get(code)
    return entry[0] if entry else f"Code {code}"


def code_to_emoji(code: int | None) -> str:
    if code is None or code not in WMO_CODES:
        return UNKNOWN_EMOJI
    return WMO_CODES[code][1]
