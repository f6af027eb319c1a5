from celery import Celery
from flask import has_app_context


celery_app = Celery('agency')


def init_celery(app):
    """
    Bind Celery to the current Flask app context so tasks can use database/session.
    """
    broker_url = app.config.get('CELERY_BROKER_URL')
    result_backend = app.config.get('CELERY_RESULT_BACKEND')

    celery_app.conf.update(
        broker_url=broker_url,
        result_backend=result_backend,
        task_serializer='json',
        result_serializer='json',
        accept_content=['json'],
        timezone='UTC',
        enable_utc=True,
        task_always_eager=app.config.get('CELERY_TASK_ALWAYS_EAGER', False),
        broker_connection_retry_on_startup=True,
    )

    class ContextTask(celery_app.Task):
        def __call__(self, *args, **kwargs):
            # Eager tasks already run inside the calling request
            if has_app_context():
                return super().__call__(*args, **kwargs)
            with app.app_context():
                return super().__call__(*args, **kwargs)

    celery_app.Task = ContextTask
    return celery_app
