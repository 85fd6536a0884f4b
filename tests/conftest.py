"""
Pytest configuration and shared fixtures for the mkpins test suite.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH so 'generator' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


HEADER = '"ITEM","P176x","PORT","BIT","FUNC1","FUNC2","FUNC3","SIGNAME","FUNC","IN/OUT","MODE","OD","DEF","ACT"'

SAMPLE_ROWS = [
    '1,46,0,0,"RD1","TXD3","SDA1","GSM_TX",2,0,,,,',
    '2,47,0,1,"TD1","RXD3","SCL1","GSM_RX",2,1,,,,',
    '3,N/A,0,2,"TXD0","AD0[7]","","UNUSED_A",0,0,,,,',
    '4,0,0,3,"RXD0","AD0[6]","","UNUSED_B",0,0,,,,',
    '5,81,0,4,"I2SRX_CLK","RD2","CAP2[0]","",0,1,,,,',
    '6,80,0,15,"TXD1","SCK0","SCK","LED_RED",0,0,0,0,1,0',
    '7,79,0,16,"RXD1","SSEL0","SSEL","BTN_OK",0,1,2,0,0,1',
    '8,50,1,18,"USB_UP_LED","PWM1[1]","CAP1[0]","I2C_SDA",0,0,0,1,1,1',
    'END',
    '9,51,1,19,"x","y","z","AFTER_END",0,0,,,,',
]

SAMPLE_SIGNALS = ["GSM_TX", "GSM_RX", "LED_RED", "BTN_OK", "I2C_SDA"]

STAMP = "Mon 19-Oct-2026 12:00:00"


def csv_text(rows, bom=False):
    return ("\ufeff" if bom else "") + "\n".join([HEADER] + list(rows)) + "\n"


@pytest.fixture
def sample_lines():
    return [HEADER] + SAMPLE_ROWS


@pytest.fixture
def sample_csv(tmp_path):
    """Write the sample pin table (with a BOM) and return its path."""
    p = tmp_path / "pinout.csv"
    p.write_text(csv_text(SAMPLE_ROWS, bom=True), encoding="utf-8")
    return p


@pytest.fixture
def write_csv(tmp_path):
    def _write(rows, name="pins.csv"):
        p = tmp_path / name
        p.write_text(csv_text(rows), encoding="utf-8")
        return p

    return _write
