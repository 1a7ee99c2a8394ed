import pytest

POINTS_URL = "https://api.weather.gov/points/39.7456,-97.0892"
FORECAST_URL = "https://api.weather.gov/gridpoints/TOP/32,81/forecast"


def make_period(name="Today", temperature=75, unit="F", short_forecast="Sunny", **extra):
    period = {
        "number": 1,
        "name": name,
        "startTime": "2025-01-21T06:00:00-06:00",
        "endTime": "2025-01-21T18:00:00-06:00",
        "isDaytime": name != "Tonight",
        "temperature": temperature,
        "temperatureUnit": unit,
        "temperatureTrend": None,
        "windSpeed": "10 mph",
        "windDirection": "S",
        "shortForecast": short_forecast,
        "detailedForecast": f"{short_forecast}, with a high near {temperature}.",
    }
    period.update(extra)
    return period


def make_forecast(*periods):
    return {
        "type": "Feature",
        "properties": {
            "units": "us",
            "generatedAt": "2025-01-21T05:00:00+00:00",
            "periods": list(periods),
        },
    }


@pytest.fixture
def points_body():
    return {
        "id": POINTS_URL,
        "type": "Feature",
        "properties": {
            "gridId": "TOP",
            "gridX": 32,
            "gridY": 81,
            "forecast": FORECAST_URL,
            "forecastHourly": FORECAST_URL + "/hourly",
        },
    }


@pytest.fixture
def sunny_forecast():
    return make_forecast(
        make_period("Today", 75, "F", "Sunny"),
        make_period("Tonight", 50, "F", "Clear"),
    )


@pytest.fixture
def nws(requests_mock, points_body, sunny_forecast):
    """Both NWS endpoints answering normally"""
    requests_mock.get(POINTS_URL, json=points_body)
    requests_mock.get(FORECAST_URL, json=sunny_forecast)
    return requests_mock
