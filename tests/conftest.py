import pytest

from filtro_devs.indexer import index_dataset
from filtro_devs.models import RawRecord


@pytest.fixture
def raw_people():
    return [
        RawRecord(name="Ana Índio", picture_url="ana.png", languages=("Java",)),
        RawRecord(name="Bruno", picture_url="bruno.png", languages=("Python", "Java")),
    ]


@pytest.fixture
def people(raw_people):
    return index_dataset(raw_people)


@pytest.fixture
def payload():
    """Formato devolvido pela API /devs."""
    return [
        {
            "id": 1,
            "name": "Ana Índio",
            "picture": "ana.png",
            "programmingLanguages": [{"id": 10, "language": "Java", "experience": "Senior"}],
        },
        {
            "id": 2,
            "name": "Bruno",
            "picture": "bruno.png",
            "programmingLanguages": [{"language": "Python"}, {"language": "Java"}],
        },
    ]
