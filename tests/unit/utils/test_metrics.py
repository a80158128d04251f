import pytest
from prometheus_client import CollectorRegistry, Histogram

from src.utils.metrics import track_time

@pytest.fixture
def histogram():
    return Histogram('test_duration_seconds', 'Test duration', registry=CollectorRegistry())

def sample_count(histogram):
    for metric in histogram.collect():
        for sample in metric.samples:
            if sample.name.endswith("_count"):
                return sample.value

def test_track_time_observes_sync_calls(histogram):
    @track_time(histogram)
    def insert(email):
        return email.upper()

    assert insert("a@b.com") == "A@B.COM"
    assert insert.__name__ == "insert"
    assert sample_count(histogram) == 1

def test_track_time_observes_failures(histogram):
    @track_time(histogram)
    def insert():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        insert()
    assert sample_count(histogram) == 1
