import matplotlib

matplotlib.use("Agg")

from pathlib import Path

import pytest

from ganttline import configuration
from ganttline.initialize import initialize
from ganttline.model.date_mode import DateMode
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.service.chart import build_chart
from ganttline.view import state as view_state

PROJECT_CSV = """wp,activity,start_date,end_date,spot_date,spot_type
WP1 Planning,Design,1,3,2,Review
WP1 Planning,Requirements,2,4,,
WP2 Build,Implementation,4,9,6,Beta
WP2 Build,Testing,8,10,10,Release
"""


@pytest.fixture
def config_path(tmp_path, monkeypatch) -> Path:
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    CONFIGURATION_REPO.reload()
    initialize()
    yield config_dir / "config.yaml"
    CONFIGURATION_REPO.reload()


@pytest.fixture(autouse=True)
def restore_header():
    yield
    view_state.set_show_header(True)


@pytest.fixture
def no_header():
    view_state.set_show_header(False)


@pytest.fixture
def project_csv(tmp_path) -> Path:
    path = tmp_path / "project.csv"
    path.write_text(PROJECT_CSV)
    return path


@pytest.fixture
def project_rows():
    return [
        ("WP1 Planning", "Design", 1, 3),
        ("WP1 Planning", "Requirements", 2, 4),
        ("WP2 Build", "Implementation", 4, 9),
        ("WP2 Build", "Testing", 8, 10),
    ]


@pytest.fixture
def spot_rows():
    return [
        ("Design", 2, "Review"),
        ("Requirements", None, None),
        ("Implementation", 6, "Beta"),
        ("Testing", 10, "Release"),
    ]


@pytest.fixture
def chart(project_rows, spot_rows):
    return build_chart(
        project_rows,
        spot_rows,
        mode=DateMode.RELATIVE_MONTH,
        project_start_date="2024-01",
        options={"mark_quarters": True, "mark_years": True},
    )
