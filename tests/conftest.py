import pathlib
import sys

import pytest

# Ensure project root on path for module imports
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

HEADER = "Date,Nom de l'entraînement,Durée,Nom de l'exercice,Ordre de la série,Poids,Réps,Distance,Secondes,RPE,Notes"


@pytest.fixture
def strong_csv():
    def build(*rows: str) -> str:
        return "\n".join([HEADER, *rows])

    return build
