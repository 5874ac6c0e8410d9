import os

# For production environments, use Redis or RabbitMQ as broker.
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL",
                              "redis://localhost:6379/0")

# Comment posting is fire-and-forget, nothing reads task results.
CELERY_TASK_IGNORE_RESULT = True

# The CELERY_ACCEPT_CONTENT setting determines the message content types that
# Celery can accept. Only JSON is accepted; checklist payloads are plain
# lists of dicts and pickle is never needed.
CELERY_ACCEPT_CONTENT = ['json']

# Serialize task messages as JSON as well.
CELERY_TASK_SERIALIZER = 'json'

# Run tasks inline instead of sending them to a broker. Intended for local
# development without Redis; production runs a worker.
CELERY_TASK_ALWAYS_EAGER = (
    os.getenv('CELERY_TASK_ALWAYS_EAGER', 'False').lower()
    in ('true', '1', 'yes', 'on')
)

# Task execution time limits
CELERY_TASK_TIME_LIMIT = 300
CELERY_TASK_SOFT_TIME_LIMIT = 240
