import pytest

from helpers import make_payload
from weather_app.models.weather_model import MainInfo, WeatherReport, WindInfo
from weather_app.services.Display_service import build_view, format_number, format_temperature, icon_url


def report_from(**overrides) -> WeatherReport:
    return WeatherReport.model_validate(make_payload(**overrides))


@pytest.mark.parametrize(
    "value, expected",
    [(21.7, "22°C"), (21.5, "22°C"), (21.49, "21°C"), (0.0, "0°C"), (-0.4, "0°C"), (-2.5, "-2°C"), (-2.6, "-3°C")],
)
def test_format_temperature_rounds_half_up(value, expected):
    assert format_temperature(value) == expected


def test_format_number_drops_integral_fraction():
    assert format_number(3.0) == "3"
    assert format_number(64) == "64"
    assert format_number(4.1) == "4.1"


def test_icon_url_template():
    assert icon_url("10d") == "https://openweathermap.org/img/wn/10d@2x.png"
    assert icon_url("01n", "https://icons.test/") == "https://icons.test/img/wn/01n@2x.png"


def test_build_view_full_report():
    view = build_view(report_from())

    assert view.city_text == "London, GB"
    assert view.temperature_text == "22°C"
    assert view.description_text == "Light rain"
    assert view.icon_url == "https://openweathermap.org/img/wn/10d@2x.png"
    assert view.icon_alt == "light rain"
    assert view.detail_lines == ["Feels like: 20°C", "Humidity: 64%", "Wind: 4.1 m/s"]


def test_missing_wind_omits_wind_line():
    payload = make_payload()
    del payload["wind"]

    view = build_view(WeatherReport.model_validate(payload))

    assert view.detail_lines == ["Feels like: 20°C", "Humidity: 64%"]
    assert not any(line.startswith("Wind") for line in view.detail_lines)


def test_missing_icon_gives_no_url():
    view = build_view(report_from(weather=[{"description": "haze"}]))

    assert view.icon_url is None
    assert view.description_text == "Haze"


def test_empty_weather_list():
    view = build_view(report_from(weather=[]))

    assert view.icon_url is None
    assert view.description_text == ""
    assert view.icon_alt == "weather icon"


def test_city_without_country():
    assert build_view(report_from(sys=None)).city_text == "London"


def test_empty_report_degrades_to_placeholders():
    view = build_view(WeatherReport())

    assert view.city_text == "Unknown location"
    assert view.temperature_text == "--"
    assert view.description_text == ""
    assert view.detail_lines == []
    assert view.icon_url is None


def test_zero_values_are_still_shown():
    view = build_view(report_from(main={"temp": 0, "feels_like": 0, "humidity": 0}, wind={"speed": 0}))

    assert view.temperature_text == "0°C"
    assert view.detail_lines == ["Feels like: 0°C", "Humidity: 0%", "Wind: 0 m/s"]


def test_non_finite_readings_are_not_rendered():
    # Bypasses validation, the way a hand-built report could
    report = WeatherReport.model_construct(
        name="Nowhere",
        main=MainInfo.model_construct(temp=float("nan"), feels_like=float("inf"), humidity=float("nan")),
        wind=WindInfo.model_construct(speed=float("-inf")),
    )

    view = build_view(report)

    assert view.temperature_text == "--"
    assert view.detail_lines == []
    assert format_temperature(float("inf")) == "--"
