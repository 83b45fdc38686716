# scoring/anomalies.py
# Flags suspicious rating patterns for manual audit. Advisory only.

from .records import Anomaly

LOW_VARIANCE_THRESHOLD = 0.1
NEUTRAL_RATING = 3


def _population_variance(values):
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def detect_anomalies(scores):
    anomalies = []

    for score in scores:
        if score.is_no_show:
            continue

        values = score.criteria.values()

        if all(v == 5 for v in values):
            anomalies.append(Anomaly(
                type='all-fives',
                description=f'Judge {score.judge_name} gave all 5s to presenter {score.presenter_id}',
                score_id=score.id,
                severity='medium',
            ))

        if all(v == 1 for v in values):
            anomalies.append(Anomaly(
                type='all-ones',
                description=f'Judge {score.judge_name} gave all 1s to presenter {score.presenter_id}',
                score_id=score.id,
                severity='high',
            ))

        # uniform 5s and 1s qualify here as well
        if _population_variance(values) < LOW_VARIANCE_THRESHOLD and values[0] != NEUTRAL_RATING:
            anomalies.append(Anomaly(
                type='low-variance',
                description=f'Judge {score.judge_name} gave nearly identical scores across all criteria',
                score_id=score.id,
                severity='low',
            ))

    return anomalies
