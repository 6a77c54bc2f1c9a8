from prometheus_client import Counter, Histogram


class MatchdayMetrics:
    """
    Matchday ticketing core metrics

    Tracks reservation outcomes, optimistic-update races and admin authentication
    """

    def __init__(self):
        # ========== Reservation Metrics ==========
        self.reservation_requests = Counter(
            'matchday_reservation_requests_total',
            'Total reservation requests',
            ['game_id', 'result'],  # result: fulfilled/partial/empty/sold_out
        )

        self.seats_reserved = Counter(
            'matchday_seats_reserved_total',
            'Seats moved from available to reserved',
            ['game_id'],
        )

        self.reservation_lost_races = Counter(
            'matchday_reservation_lost_races_total',
            'Conditional reservation updates that affected no row',
            ['game_id'],
        )

        self.reservation_duration = Histogram(
            'matchday_reservation_duration_seconds',
            'Reservation processing time',
            ['game_id'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        # ========== Admin Session Metrics ==========
        self.auth_failures = Counter(
            'matchday_auth_failures_total',
            'Rejected admin logins and session verifications',
            ['reason'],  # reason: bad_credentials/invalid_session
        )

    # ========== Helper Methods ==========

    def record_reservation(self, *, game_id: int, result: str, reserved: int, duration: float):
        self.reservation_requests.labels(game_id=game_id, result=result).inc()
        if reserved:
            self.seats_reserved.labels(game_id=game_id).inc(reserved)
        self.reservation_duration.labels(game_id=game_id).observe(duration)

    def record_lost_race(self, *, game_id: int):
        self.reservation_lost_races.labels(game_id=game_id).inc()

    def record_auth_failure(self, *, reason: str):
        self.auth_failures.labels(reason=reason).inc()


# Global metrics instance
metrics = MatchdayMetrics()
