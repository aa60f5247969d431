from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import settings
from .logging_setup import configure_logging
from .routers import files
from .services.file_ops import FileExplorer

logger = structlog.get_logger()

app = FastAPI(title=settings.app_name)
app.state.explorer = FileExplorer(max_random_attempts=settings.destination_attempts)

_SECURITY_HEADERS = {
    'X-Frame-Options': 'DENY',
    'X-Content-Type-Options': 'nosniff',
    'Referrer-Policy': 'strict-origin-when-cross-origin',
}


if settings.cors_origin_list:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=['GET', 'POST', 'DELETE', 'OPTIONS'],
        allow_headers=['Content-Type'],
    )


def _apply_security_headers(response):
    for key, value in _SECURITY_HEADERS.items():
        response.headers[key] = value
    return response


@app.middleware('http')
async def security_middleware(request: Request, call_next):
    response = await call_next(request)
    return _apply_security_headers(response)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error('file_explorer.unhandled_error', path=request.url.path, exc_info=exc)
    if request.url.path.startswith('/api/'):
        response = JSONResponse({'detail': 'Internal server error. Please try again.'}, status_code=500)
    else:
        response = PlainTextResponse('Unexpected error. Please try again.', status_code=500)
    return _apply_security_headers(response)


@app.on_event('startup')
def startup():
    configure_logging(settings.log_level, settings.log_json)
    logger.info('file_explorer.startup', roots=settings.root_list)


@app.get('/healthz')
def healthz():
    return {'ok': True}


app.include_router(files.router)


def run():
    import uvicorn

    uvicorn.run('file_explorer.main:app', host=settings.app_host, port=settings.app_port, log_level=settings.log_level)


if __name__ == '__main__':
    run()
