"""
Maintenance jobs - run from a cron or Heroku Scheduler.

Commands:
- flask cleanup-rate-limits: purges stale rate limit attempts (hourly)
- flask init-categories: seeds the default categories
"""
import click
from flask import current_app
from flask.cli import with_appcontext


@click.command('cleanup-rate-limits')
@click.option('--older-than', 'older_than', type=int, default=None,
              help='Retention in minutes (RATE_LIMIT_RETENTION_MINUTES by default)')
@with_appcontext
def cleanup_rate_limits_cmd(older_than):
    """Deletes rate limit attempts older than the retention window."""
    from naijafind.services.rate_limit_service import rate_limiter

    minutes = older_than or current_app.config.get('RATE_LIMIT_RETENTION_MINUTES', 120)
    result = rate_limiter.cleanup(minutes)
    click.echo(f"Deleted {result['deleted']} rate limit attempts older than {minutes} min")


@click.command('init-categories')
@with_appcontext
def init_categories_cmd():
    """Creates the default categories that do not exist yet."""
    from naijafind.services.category_service import seed_categories

    result = seed_categories()
    click.echo(result['message'])
    for name in result['created']:
        click.echo(f'  + {name}')
