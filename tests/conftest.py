import pytest
from fastapi.testclient import TestClient

from app.core.settings import Settings
from app.services.analyzer import TextAnalyzer

GROWTH_TEXT = "Рост составил 25% в 2023 году. Это хороший результат."
PLAIN_TEXT = "Просто текст без особых данных вообще."


@pytest.fixture
def analyzer():
    return TextAnalyzer(Settings())


@pytest.fixture
def client():
    from app.main import app
    from app.routes import deps

    deps.preferences.reset()
    with TestClient(app) as c:
        yield c
    deps.preferences.reset()
