import matplotlib

matplotlib.use("Agg")

from tick_direction.data.schemas import Observation
from tick_direction.visualization import plot_price_volume


def test_plot_price_volume_writes_png(tmp_path):
    observations = [
        Observation("IBM", 100.0 + i % 3, 10 + i, f"2024-01-02 09:{30 + i}:00") for i in range(12)
    ]
    save_path = tmp_path / "charts" / "ibm.png"

    path = plot_price_volume(observations, accuracy=0.75, symbol="IBM", save_path=save_path)

    assert path == save_path
    assert path.exists()
    assert path.stat().st_size > 0
