from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import PUBLIC_GAMES, TICKETING_BASE


@pytest.mark.integration
class TestCommonEndpoints:
    def test_health(self, client: TestClient):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_metrics_exposes_matchday_counters(self, client: TestClient, open_game):
        client.post(
            f'{PUBLIC_GAMES}/{open_game["game_id"]}/ticket-requests',
            json={'name': 'Mia Keller', 'email': 'mia@example.com'},
        )

        response = client.get('/metrics')

        assert response.status_code == 200
        assert 'matchday_reservation_requests_total' in response.text
        assert 'matchday_seats_reserved_total' in response.text


@pytest.mark.integration
class TestErrorResponses:
    def test_malformed_body_is_400_with_detail(self, client: TestClient, open_game):
        response = client.post(
            f'{PUBLIC_GAMES}/{open_game["game_id"]}/ticket-requests',
            content='not json',
            headers={'content-type': 'application/json'},
        )

        assert response.status_code == 400
        assert 'error' in response.json()
        assert 'detail' in response.json()

    def test_non_numeric_path_id_is_400(self, client: TestClient):
        response = client.get(f'{PUBLIC_GAMES}/abc')

        assert response.status_code == 400

    def test_unknown_route_is_404(self, client: TestClient):
        response = client.get(f'{TICKETING_BASE}/nowhere')

        assert response.status_code == 404
        assert response.json() == {'error': 'Not Found'}
