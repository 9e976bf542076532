"""
Evaluation of the heuristic against observed shot outcomes.
"""
import json

import numpy as np
from sklearn.metrics import roc_auc_score, brier_score_loss, log_loss

from .config import OUTPUT_DIR


def evaluate_model(y_true, y_pred, label="Heuristic xG"):
    """
    Calculate evaluation metrics.

    Args:
        y_true: Actual outcomes (0/1)
        y_pred: Predicted probabilities
        label: Label for printing

    Returns:
        dict of metrics. roc_auc is None when only one class is present.
    """
    y_true = np.asarray(y_true, dtype=int)
    y_pred = np.asarray(y_pred, dtype=float)

    has_both_classes = len(np.unique(y_true)) > 1

    metrics = {
        'roc_auc': float(roc_auc_score(y_true, y_pred)) if has_both_classes else None,
        'brier': float(brier_score_loss(y_true, y_pred)),
        'log_loss': float(log_loss(y_true, y_pred, labels=[0, 1])),
        'n_shots': int(len(y_true)),
        'n_goals': int(y_true.sum()),
        'total_xg': float(y_pred.sum()),
    }

    print(f"\n{label} Metrics:")
    if metrics['roc_auc'] is not None:
        print(f"  ROC AUC:   {metrics['roc_auc']:.4f}")
    print(f"  Brier:     {metrics['brier']:.4f}")
    print(f"  Log Loss:  {metrics['log_loss']:.4f}")
    print(f"  Shots:     {metrics['n_shots']}")
    print(f"  Goals:     {metrics['n_goals']}")
    print(f"  Total xG:  {metrics['total_xg']:.1f}")

    return metrics


def save_metrics(metrics, filename="metrics.json"):
    """Save metrics to JSON file."""
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    path = OUTPUT_DIR / filename
    with open(path, 'w') as f:
        json.dump(metrics, f, indent=2)
    print(f"Saved metrics to {path}")
    return path
