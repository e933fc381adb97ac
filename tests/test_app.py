"""
Tests for the Flask service
"""

import pytest

from app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


class TestReverseClientIP:

    def test_forwarded_header(self, client):
        response = client.get('/', headers={'X-Forwarded-For': '10.0.20.21, 5.5.5.5'})
        assert response.status_code == 200
        data = response.get_json()
        assert data['original_ip'] == '10.0.20.21'
        assert data['reversed_ip'] == '21.20.0.10'
        assert data['method'] == 'GET'
        assert data['path'] == '/'

    def test_real_ip_header(self, client):
        response = client.post('/', headers={'X-Real-IP': '2001:db8::1'})
        assert response.status_code == 200
        data = response.get_json()
        assert data['reversed_ip'] == '0001:0000:0000:0000:0000:0000:0db8:2001'
        assert data['method'] == 'POST'

    def test_remote_addr(self, client):
        response = client.get('/', environ_base={'REMOTE_ADDR': '::ffff:192.168.1.1'})
        assert response.status_code == 200
        assert response.get_json()['original_ip'] == '192.168.1.1'

    def test_forwarded_mapped_address_is_reversed_as_ipv6(self, client):
        response = client.get('/', headers={'X-Forwarded-For': '::ffff:1.2.3.4'})
        data = response.get_json()
        assert data['original_ip'] == '::ffff:1.2.3.4'
        assert data['reversed_ip'] == '1.2.3.4:ffff:0000:0000:0000:0000:0000:0000'

    def test_catch_all_path(self, client):
        response = client.delete('/some/path', headers={'X-Real-IP': '1.2.3.4'})
        assert response.status_code == 200
        data = response.get_json()
        assert data['path'] == '/some/path'
        assert data['reversed_ip'] == '4.3.2.1'

    def test_user_agent(self, client):
        response = client.get('/', headers={'X-Real-IP': '1.2.3.4', 'User-Agent': 'curl/8.0'})
        assert response.get_json()['user_agent'] == 'curl/8.0'

    def test_invalid_detected_ip(self, client):
        response = client.get('/', headers={'X-Forwarded-For': 'garbage'})
        assert response.status_code == 400
        data = response.get_json()
        assert data['success'] is False
        assert data['error']['code'] == 'INVALID_DETECTED_IP'
        assert data['error']['details'] == {'detected_ip': 'garbage'}

    def test_unknown_client(self, client):
        response = client.get('/', environ_base={'REMOTE_ADDR': ''})
        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'IP_DETECTION_FAILED'


class TestReverseSubmittedIP:

    def test_reverse(self, client):
        response = client.post(
            '/reverse', json={'ip': '192.168.6.5'}, headers={'X-Real-IP': '9.9.9.9'}
        )
        assert response.status_code == 201
        data = response.get_json()
        assert data['original_ip'] == '192.168.6.5'
        assert data['reversed_ip'] == '5.6.168.192'
        assert data['family'] == 'IPv4'
        assert data['request_ip'] == '9.9.9.9'
        assert 'timestamp' in data

    def test_missing_ip(self, client):
        response = client.post('/reverse', json={})
        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'MISSING_IP'

    def test_body_not_json(self, client):
        response = client.post('/reverse', data='1.2.3.4')
        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'MISSING_IP'

    def test_invalid_ip(self, client):
        response = client.post('/reverse', json={'ip': 'not-an-ip'})
        assert response.status_code == 400
        error = response.get_json()['error']
        assert error['code'] == 'INVALID_IP'
        assert error['details'] == {'provided_ip': 'not-an-ip'}


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'healthy', 'service': 'ip-reverse-app'}


class TestErrorHandling:

    def test_unexpected_exception(self, client, monkeypatch):
        def explode(ip):
            raise RuntimeError('boom')

        monkeypatch.setattr('app.reversal', explode)

        response = client.get('/', headers={'X-Real-IP': '1.2.3.4'})
        assert response.status_code == 500
        data = response.get_json()
        assert data['success'] is False
        assert data['error']['code'] == 'INTERNAL_ERROR'

    def test_method_not_allowed(self, client):
        response = client.open('/', method='TRACE')
        assert response.status_code == 405
        data = response.get_json()
        assert data['success'] is False
        assert data['error']['code'] == 'METHOD_NOT_ALLOWED'


def test_request_ip_is_normalized(client):
    response = client.post(
        '/reverse', json={'ip': '1.2.3.4'}, headers={'X-Forwarded-For': '::ffff:9.9.9.9'}
    )
    assert response.status_code == 201
    assert response.get_json()['request_ip'] == '9.9.9.9'
