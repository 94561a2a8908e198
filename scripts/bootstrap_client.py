"""
Interactive setup of a deployed instance over HTTP.

Usage:
    python scripts/bootstrap_client.py create-admin
    python scripts/bootstrap_client.py init-categories

API URL: --api-url, else NAIJAFIND_API_URL from the environment or .env,
else prompted. BOOTSTRAP_TOKEN is sent as X-Bootstrap-Token when set.
"""

import os
import re
import sys

import click
import requests
from dotenv import load_dotenv

load_dotenv()

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def _post(api_url, path, payload):
    """POSTs JSON to the bootstrap endpoint and returns the decoded body."""
    endpoint = f"{api_url.rstrip('/')}{path}"
    click.echo(f'Endpoint: {endpoint}')

    headers = {'Content-Type': 'application/json'}
    token = os.getenv('BOOTSTRAP_TOKEN')
    if token:
        headers['X-Bootstrap-Token'] = token

    try:
        response = requests.post(endpoint, json=payload, headers=headers, timeout=30)
    except requests.RequestException as e:
        click.echo(f'Erreur réseau: {e}', err=True)
        click.echo("Vérifiez que l'API est déployée et que l'URL est correcte.", err=True)
        sys.exit(1)

    if not response.ok:
        click.echo(f'Erreur HTTP {response.status_code}: {response.text[:500]}', err=True)
        sys.exit(1)

    try:
        return response.json()
    except ValueError:
        click.echo(f'Réponse invalide du serveur (pas de JSON): {response.text[:200]}', err=True)
        sys.exit(1)


@click.group()
@click.option('--api-url', envvar='NAIJAFIND_API_URL', prompt='URL de l\'API (ex: https://api.naijafind.ng)',
              help='Base URL of the deployed API')
@click.pass_context
def cli(ctx, api_url):
    ctx.obj = {'api_url': api_url.strip()}


@cli.command('create-admin')
@click.pass_context
def create_admin(ctx):
    """Creates an admin user or promotes an existing one."""
    email = click.prompt("Email de l'administrateur").strip()
    if not EMAIL_RE.match(email):
        click.echo("Format d'email invalide", err=True)
        sys.exit(1)

    first_name = click.prompt('Prénom (optionnel)', default='', show_default=False).strip()
    last_name = click.prompt('Nom (optionnel)', default='', show_default=False).strip()
    phone = click.prompt('Téléphone (optionnel)', default='', show_default=False).strip()

    payload = {'email': email}
    if first_name:
        payload['firstName'] = first_name
    if last_name:
        payload['lastName'] = last_name
    if phone:
        payload['phone'] = phone

    data = _post(ctx.obj['api_url'], '/admin/create', payload)
    click.echo(data.get('message', 'OK'))
    click.echo(f"L'utilisateur doit ensuite se connecter avec l'email {email}.")


@cli.command('init-categories')
@click.option('--defaults/--custom', default=None, help='Seed the default list or enter categories')
@click.pass_context
def init_categories(ctx, defaults):
    """Seeds the default categories, or a list typed in interactively."""
    if defaults is None:
        defaults = click.confirm('Utiliser les catégories par défaut ?', default=True)

    if defaults:
        data = _post(ctx.obj['api_url'], '/init', {})
    else:
        categories = []
        order = 1
        while True:
            name = click.prompt(f'Nom de la catégorie #{order} (vide pour terminer)',
                                default='', show_default=False).strip()
            if not name:
                break
            description = click.prompt('Description (optionnel)', default='', show_default=False).strip()
            icon = click.prompt('Icône (optionnel)', default='', show_default=False).strip()
            categories.append({
                'name': name,
                'description': description or None,
                'icon': icon or None,
                'order': order,
            })
            order += 1

        if not categories:
            click.echo('Aucune catégorie à initialiser', err=True)
            sys.exit(1)
        data = _post(ctx.obj['api_url'], '/categories/init', {'categories': categories})

    click.echo(data.get('message', 'OK'))
    for name in data.get('created', []):
        click.echo(f'  + {name}')


if __name__ == '__main__':
    cli()
