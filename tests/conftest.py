"""
Global test configuration, sample Wolfram|Alpha payloads and builders.
"""

from collections.abc import Callable
import copy
import json
import logging
import os
import typing

import pytest

from wolfram_answers.core import QueryResult, Section, Subsection

# --- Sample API payloads ---

SPEED_OF_LIGHT_PAYLOAD: dict[str, typing.Any] = {
    "queryresult": {
        "success": True,
        "error": False,
        "numpods": 3,
        "datatypes": "Quantity",
        "timedout": "",
        "timedoutpods": "",
        "timing": 1.024,
        "parsetiming": 0.171,
        "parsetimedout": False,
        "recalculate": "",
        "id": "MSP1234",
        "host": "https://www6b3.wolframalpha.com",
        "server": "42",
        "related": "",
        "version": "2.6",
        "pods": [
            {
                "title": "Input interpretation",
                "scanner": "Identity",
                "id": "Input",
                "position": 100,
                "error": False,
                "numsubpods": 1,
                "subpods": [{"title": "", "plaintext": "speed of light"}],
                "expressiontypes": {"name": "Default"},
            },
            {
                "title": "Value",
                "scanner": "Unit",
                "id": "Value",
                "position": 200,
                "error": False,
                "numsubpods": 1,
                "primary": True,
                "subpods": [
                    {
                        "title": "",
                        "plaintext": "299792458 m/s (meters per second)",
                        "primary": True,
                        "microsources": {"microsource": "PhysicalConstantData"},
                        "datasources": {
                            "datasource": ["CODATA2018", "PhysicalConstantData"]
                        },
                    }
                ],
                "expressiontypes": [{"name": "Default"}, {"name": "Default"}],
                "states": [
                    {"name": "More units", "input": "Value__More units"},
                ],
                "infos": {
                    "units": [{"short": "m/s", "long": "meters per second"}],
                    "links": [
                        {
                            "url": "https://reference.wolfram.com/",
                            "text": "Documentation",
                            "title": "Documentation",
                        }
                    ],
                },
            },
            {
                "title": "Interpretation",
                "scanner": "Data",
                "id": "Comparison",
                "position": 300,
                "error": False,
                "numsubpods": 1,
                "subpods": [
                    {
                        "title": "",
                        "plaintext": "the defined exact speed of light in vacuum",
                    }
                ],
            },
        ],
        "sources": {
            "url": "https://www6b3.wolframalpha.com/sources/PhysicalConstantDataSourceInformationNotes.html",
            "text": "Physical constant data",
        },
    }
}

INVALID_APP_ID_PAYLOAD: dict[str, typing.Any] = {
    "queryresult": {
        "success": False,
        "error": {"code": "1", "msg": "Invalid appid"},
        "numpods": 0,
        "datatypes": "",
        "timedout": "",
        "timedoutpods": "",
        "timing": 0.013,
        "parsetiming": 0.0,
        "parsetimedout": False,
        "recalculate": "",
        "id": "",
        "host": "https://www6b3.wolframalpha.com",
        "server": "42",
        "related": "",
        "version": "2.6",
    }
}

DID_YOU_MEAN_PAYLOAD: dict[str, typing.Any] = {
    "queryresult": {
        "success": False,
        "error": False,
        "numpods": 0,
        "didyoumeans": [
            {"score": "0.416", "level": "medium", "val": "France"},
            {"score": "0.2", "level": "low", "val": "Frances"},
        ],
        "tips": {"text": "Check your spelling, and use English"},
    }
}


@pytest.fixture
def speed_of_light_payload() -> dict[str, typing.Any]:
    return copy.deepcopy(SPEED_OF_LIGHT_PAYLOAD)


@pytest.fixture
def speed_of_light_json(speed_of_light_payload) -> bytes:
    return json.dumps(speed_of_light_payload).encode("utf-8")


@pytest.fixture
def invalid_app_id_payload() -> dict[str, typing.Any]:
    return copy.deepcopy(INVALID_APP_ID_PAYLOAD)


@pytest.fixture
def did_you_mean_payload() -> dict[str, typing.Any]:
    return copy.deepcopy(DID_YOU_MEAN_PAYLOAD)


# --- Builders ---


@pytest.fixture
def make_result() -> Callable[..., QueryResult]:
    """Build a QueryResult from section titles and subsection texts.

    Usage:
        result = make_result(("Value", ["42 meters"]), ("Notes", ["a", "b"]))
    """

    def _build(*sections: tuple[str, list[str]]) -> QueryResult:
        built = [
            Section(
                title=title,
                subsections=tuple(Subsection(plaintext=t) for t in texts),
                num_subsections=len(texts),
            )
            for title, texts in sections
        ]
        return QueryResult(sections=built, num_sections=len(built), success=True)

    return _build


# --- Environment Isolation (Autouse) ---


@pytest.fixture(autouse=True)
def isolate_wolfram_env(request, monkeypatch, tmp_path):
    """Ensure a clean WOLFRAM_* environment for each test.

    Also points the home config file at an isolated temp path and runs from
    an empty directory so no real pyproject.toml is picked up.

    Escape hatch: @pytest.mark.allow_env_pollution keeps the environment.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("WOLFRAM_"):
            monkeypatch.delenv(key, raising=False)

    fake_home_file = tmp_path / "home_config_isolated" / "wolfram_answers.toml"
    monkeypatch.setenv("WOLFRAM_ANSWERS_CONFIG_HOME", str(fake_home_file))

    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Sets the log level for noisy external libraries to WARNING."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "integration: Component integration tests with mocked HTTP",
        "allow_env_pollution: Keep the real WOLFRAM_* environment",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
