import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from django.test import override_settings

from apps.common import views


class HealthViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.data_dir = Path(tempfile.mkdtemp(prefix='storefront-health-'))
        self.addCleanup(shutil.rmtree, self.data_dir, True)
        self.catalog_path = self.data_dir / 'products.json'
        self.cart_path = self.data_dir / 'cart.json'

    def _ready(self):
        with override_settings(CATALOG_PATH=self.catalog_path, CART_PATH=self.cart_path):
            response = views.ready_health(None)
        return response, json.loads(response.content)

    def test_live_health_returns_alive_payload(self):
        response = views.live_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'alive')

    def test_ready_health_ok_when_catalog_readable(self):
        self.catalog_path.write_text(json.dumps([{'id': 1}, {'id': 2}]), encoding='utf-8')
        response, payload = self._ready()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(payload['status'], 'ok')
        self.assertEqual(payload['checks']['catalog']['products'], 2)
        self.assertEqual(payload['checks']['cart']['status'], 'ok')

    def test_ready_health_degraded_when_catalog_missing(self):
        response, payload = self._ready()
        self.assertEqual(response.status_code, 503)
        self.assertEqual(payload['status'], 'degraded')
        self.assertEqual(payload['checks']['catalog']['status'], 'fail')

    def test_ready_health_degraded_when_catalog_corrupt(self):
        self.catalog_path.write_text('{not json', encoding='utf-8')
        response, payload = self._ready()
        self.assertEqual(response.status_code, 503)
        self.assertEqual(payload['checks']['catalog']['status'], 'fail')

    def test_ready_health_degraded_when_catalog_not_an_array(self):
        self.catalog_path.write_text('{"id": 1}', encoding='utf-8')
        response, payload = self._ready()
        self.assertEqual(response.status_code, 503)
        self.assertIn('array', payload['checks']['catalog']['error'])

    def test_ready_health_cart_check_accepts_missing_nested_directory(self):
        self.catalog_path.write_text('[]', encoding='utf-8')
        self.cart_path = self.data_dir / 'nested' / 'cart.json'
        response, payload = self._ready()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(payload['checks']['cart']['status'], 'ok')

    @mock.patch('apps.common.views.os.access', return_value=False)
    def test_ready_health_degraded_when_cart_directory_read_only(self, _mock_access):
        self.catalog_path.write_text('[]', encoding='utf-8')
        response, payload = self._ready()
        self.assertEqual(response.status_code, 503)
        self.assertEqual(payload['checks']['cart']['status'], 'fail')
        self.assertTrue(_mock_access.called)
        self.assertEqual(_mock_access.call_args[0][1], os.W_OK)
