import json
import os
import time
from pathlib import Path

from django.conf import settings
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _catalog_check(path: Path):
    started = time.time()
    try:
        with path.open('r', encoding='utf-8') as fh:
            data = json.load(fh)
    except FileNotFoundError:
        logger.warning('Catalog health check failed; document missing', path=str(path))
        return {'status': 'fail', 'error': 'catalog document missing'}
    except (OSError, ValueError) as e:
        logger.warning('Catalog health check failed', path=str(path), error=str(e))
        return {'status': 'fail', 'error': str(e)}
    if not isinstance(data, list):
        logger.warning('Catalog health check failed; not an array', path=str(path))
        return {'status': 'fail', 'error': 'catalog document is not a JSON array'}
    latency = round((time.time() - started) * 1000, 2)
    logger.debug('Catalog health check succeeded', products=len(data), latency_ms=latency)
    return {'status': 'ok', 'products': len(data), 'latency_ms': latency}


def _cart_check(path: Path):
    # The cart file may not exist yet; its directory must accept new files.
    directory = path.parent
    while not directory.exists() and directory != directory.parent:
        directory = directory.parent
    if not os.access(directory, os.W_OK):
        logger.warning('Cart health check failed; directory not writable', path=str(path))
        return {'status': 'fail', 'error': 'cart directory is not writable'}
    if path.exists() and not os.access(path, os.R_OK | os.W_OK):
        logger.warning('Cart health check failed; document not accessible', path=str(path))
        return {'status': 'fail', 'error': 'cart document is not readable/writable'}
    logger.debug('Cart health check succeeded', path=str(path))
    return {'status': 'ok'}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: verifies the catalog and cart documents are usable."""
    checks = {
        'catalog': _catalog_check(Path(settings.CATALOG_PATH)),
        'cart': _cart_check(Path(settings.CART_PATH)),
    }

    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    payload = {
        'status': overall_status,
        'checks': checks,
    }
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(payload, status=http_status)


def not_found(request, exception=None):
    """JSON 404 for paths no route matches."""
    logger.info('No route matched', path=getattr(request, 'path', None))
    return JsonResponse({'error': 'Not found'}, status=404)
