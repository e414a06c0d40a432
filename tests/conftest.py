import pathlib
from typing import List

import pytest

from models import TelemetryRecord
from parsing import parse_csv_text

MAC_A = "a4:83:e7:11:22:33"
MAC_B = "3c:22:fb:44:55:66"

SAMPLE_CSV = f"""Date,Time,AP Name,AP IP,MAC Address,SNR,median_rssi,median_ht_rate
Dec 19 2024,10:00:00,AP-1,10.0.0.1,{MAC_A},30,40,250
Dec 19 2024,09:00:00,AP-1,10.0.0.1,{MAC_A},10,25,100
Dec 19 2024,11:00:00,AP-2,10.0.0.2,{MAC_A},20,32,180
Dec 19 2024,12:00:00,AP-1,10.0.0.1,{MAC_A},0,0,0
Dec 20 2024,08:00:00,AP-2,10.0.0.2,{MAC_A},26,45,210
Dec 19 2024,10:30:00,AP-2,10.0.0.2,{MAC_B},18,33,160
not a date,10:00:00,AP-3,10.0.0.3,{MAC_B},22,31,150
"""


def make_record(**kwargs) -> TelemetryRecord:
    defaults = dict(
        date="Dec 19 2024",
        time="10:00:00",
        ap_name="AP-1",
        ap_ip="10.0.0.1",
        mac_address=MAC_A,
        snr=30.0,
        median_rssi=40.0,
        median_ht_rate=250.0,
    )
    defaults.update(kwargs)
    return TelemetryRecord(**defaults)


@pytest.fixture()
def sample_text() -> str:
    return SAMPLE_CSV


@pytest.fixture()
def sample_records() -> List[TelemetryRecord]:
    return parse_csv_text(SAMPLE_CSV)


@pytest.fixture()
def sample_csv(tmp_path: pathlib.Path) -> pathlib.Path:
    path = tmp_path / "telemetry.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
