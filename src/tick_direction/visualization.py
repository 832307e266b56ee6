"""
Visualization of a direction-classifier run.

Creates a chart showing:
- Price per observation
- Volume bars
- Training accuracy as a flat line
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt

from .data.schemas import Observation


def plot_price_volume(
    observations: Sequence[Observation],
    accuracy: float,
    symbol: str = "IBM",
    save_path: Optional[Path] = None,
    show: bool = False,
) -> Path:
    """
    Plot price/volume over the observation sequence with the accuracy line.

    Args:
        observations: Observations in the order they were labeled
        accuracy: Training accuracy in [0, 1]
        symbol: Instrument symbol (for title and default filename)
        save_path: Path to save image (default: direction_SYMBOL_YYYYMMDD_HHMMSS.png)
        show: Whether to display the plot

    Returns:
        Path to saved image
    """
    positions = list(range(len(observations)))
    prices = [obs.price for obs in observations]
    volumes = [obs.volume for obs in observations]

    fig, (ax_price, ax_volume) = plt.subplots(
        2, 1, figsize=(14, 8), sharex=True, gridspec_kw={"height_ratios": [3, 1]}
    )

    ax_price.plot(positions, prices, color="#2E86AB", linewidth=2, label="Open Price")
    ax_price.set_ylabel("Price", fontsize=12, fontweight="bold")
    ax_price.grid(True, alpha=0.3, linestyle="--", linewidth=0.5)

    ax_acc = ax_price.twinx()
    ax_acc.axhline(
        y=accuracy * 100,
        color="#A23B72",
        linestyle="--",
        linewidth=1.5,
        label=f"Naive Bayes Accuracy ({accuracy:.2%})",
    )
    ax_acc.set_ylim(0, 100)
    ax_acc.set_ylabel("Accuracy (%)", fontsize=12, fontweight="bold")

    handles, labels = ax_price.get_legend_handles_labels()
    acc_handles, acc_labels = ax_acc.get_legend_handles_labels()
    ax_price.legend(handles + acc_handles, labels + acc_labels, loc="upper left", fontsize=10)

    ax_volume.bar(positions, volumes, color="#F18F01", alpha=0.6)
    ax_volume.set_ylabel("Volume", fontsize=12, fontweight="bold")
    ax_volume.grid(True, alpha=0.3, linestyle="--", linewidth=0.5)

    # timestamps are opaque strings; label a handful of positions
    if observations:
        step = max(1, len(observations) // 8)
        ticks = positions[::step]
        ax_volume.set_xticks(ticks)
        ax_volume.set_xticklabels([observations[i].timestamp for i in ticks], rotation=45, ha="right")

    ax_price.set_title(
        f"{symbol} Intraday Price/Volume\nNext-Tick Direction Classifier",
        fontsize=14,
        fontweight="bold",
        pad=20,
    )
    plt.tight_layout()

    if save_path is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        save_path = Path(f"direction_{symbol.replace('/', '_')}_{timestamp}.png")

    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()
    else:
        plt.close(fig)

    return save_path
