"""
Celery tasks package.

Import directly from modules when needed:
  from agency.tasks.notification_tasks import send_notification_task
"""
