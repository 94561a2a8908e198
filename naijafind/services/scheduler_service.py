"""
Scheduler service - in-app background jobs on APScheduler.

Jobs:
- cleanup_rate_limits: every hour, purges stale rate limit attempts
"""

import atexit
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger


scheduler = BackgroundScheduler()


def init_scheduler(app):
    """
    Registers the jobs and starts the scheduler.
    Called from create_app() when SCHEDULER_ENABLED is set.
    """
    # Reloader spawns a second process
    if scheduler.running:
        return

    def run_with_context(func):
        def wrapper():
            with app.app_context():
                try:
                    func()
                except Exception as e:
                    app.logger.error(f"Scheduler error in {func.__name__}: {e}")
        wrapper.__name__ = func.__name__
        return wrapper

    @run_with_context
    def cleanup_rate_limits_job():
        from .rate_limit_service import rate_limiter
        result = rate_limiter.cleanup(app.config.get('RATE_LIMIT_RETENTION_MINUTES', 120))
        app.logger.info(f"[SCHEDULER] cleanup_rate_limits: deleted={result['deleted']}")

    scheduler.add_job(
        func=cleanup_rate_limits_job,
        trigger=IntervalTrigger(hours=1),
        id='cleanup_rate_limits',
        name='Rate limit cleanup',
        replace_existing=True
    )

    scheduler.start()
    app.logger.info("[SCHEDULER] Started with 1 job: cleanup_rate_limits")

    atexit.register(lambda: scheduler.shutdown(wait=False))


def get_scheduler_status():
    """Status of all scheduled jobs."""
    jobs = []
    for job in scheduler.get_jobs():
        next_run = job.next_run_time
        jobs.append({
            'id': job.id,
            'name': job.name,
            'next_run': next_run.isoformat() if next_run else None,
            'trigger': str(job.trigger)
        })
    return {
        'running': scheduler.running,
        'jobs': jobs
    }
