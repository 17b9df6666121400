from config import Settings, build_settings


def _source(values):
    return lambda key, default=None: values.get(key, default)


def test_defaults():
    assert build_settings(_source({})) == Settings()


def test_overrides():
    s = build_settings(_source({
        "API_BASE_URL": "https://api.example.test/",
        "API_TOKEN": "t",
        "DASHBOARD_TIMEZONE": "UTC",
        "WEEK_START_DAY": "0",
        "REQUEST_TIMEOUT": "7.5",
        "LOG_LEVEL": "debug",
    }))
    assert s.api_base == "https://api.example.test"
    assert s.api_token == "t"
    assert s.timezone == "UTC"
    assert s.week_start_day == 0
    assert s.request_timeout == 7.5
    assert s.log_level == "DEBUG"


def test_bad_values_fall_back():
    s = build_settings(_source({"WEEK_START_DAY": "9", "REQUEST_TIMEOUT": "soon"}))
    assert s.week_start_day == 6
    assert s.request_timeout == 30.0
