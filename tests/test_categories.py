"""
Category tests - public list, admin CRUD, seeding.
"""
from naijafind.models import Category, DEFAULT_CATEGORIES


class TestPublicList:

    def test_only_active_sorted_by_order_then_name(self, client, db):
        db.session.add_all([
            Category(name='Zinc', order=None),
            Category(name='Beta', order=2),
            Category(name='Alpha', order=None),
            Category(name='First', order=1),
            Category(name='Hidden', order=0, is_active=False),
        ])
        db.session.commit()
        names = [c['name'] for c in client.get('/api/public/categories').get_json()['categories']]
        assert names == ['First', 'Beta', 'Alpha', 'Zinc']


class TestAdminCrud:

    def test_add_and_duplicate(self, admin_client):
        res = admin_client.post('/api/admin/categories', json={'name': 'Mining', 'icon': 'ri-hammer-line'})
        assert res.status_code == 201
        again = admin_client.post('/api/admin/categories', json={'name': 'Mining'})
        assert again.status_code == 409

    def test_update_and_rename_conflict(self, admin_client, db, reload):
        a = Category(name='Fashion')
        b = Category(name='Beauty')
        db.session.add_all([a, b])
        db.session.commit()

        res = admin_client.put(f'/api/admin/categories/{a.id}', json={'is_active': False, 'order': 3})
        assert res.status_code == 200
        category = reload(Category, a.id)
        assert category.is_active is False
        assert category.order == 3
        assert category.name == 'Fashion'

        assert admin_client.put(f'/api/admin/categories/{b.id}', json={'name': 'Fashion'}).status_code == 409

    def test_delete_refused_while_in_use(self, admin_client, db, supplier):
        category = Category(name='Agriculture')
        unused = Category(name='Unused')
        db.session.add_all([category, unused])
        db.session.commit()

        assert admin_client.delete(f'/api/admin/categories/{category.id}').status_code == 409
        assert admin_client.delete(f'/api/admin/categories/{unused.id}').status_code == 200

    def test_admin_list_includes_inactive(self, admin_client, db):
        db.session.add(Category(name='Old', is_active=False))
        db.session.commit()
        names = [c['name'] for c in admin_client.get('/api/admin/categories').get_json()['categories']]
        assert names == ['Old']

    def test_stats_count_suppliers(self, admin_client, supplier):
        assert admin_client.get('/api/admin/categories/stats').get_json() == {'Agriculture': 1}

    def test_buyer_cannot_manage(self, buyer_client):
        assert buyer_client.post('/api/admin/categories', json={'name': 'X'}).status_code == 403


class TestSeeding:

    def test_seed_defaults_then_skip(self, admin_client, db):
        first = admin_client.post('/api/admin/categories/seed').get_json()
        assert len(first['created']) == len(DEFAULT_CATEGORIES)
        assert first['skipped'] == []

        second = admin_client.post('/api/admin/categories/seed').get_json()
        assert second['created'] == []
        assert len(second['skipped']) == len(DEFAULT_CATEGORIES)
        assert second['message'] == f'0 catégories créées, {len(DEFAULT_CATEGORIES)} déjà existantes'
        assert Category.query.count() == len(DEFAULT_CATEGORIES)

    def test_init_categories_cli(self, app, db):
        result = app.test_cli_runner().invoke(args=['init-categories'])
        assert result.exit_code == 0
        assert Category.query.count() == len(DEFAULT_CATEGORIES)
