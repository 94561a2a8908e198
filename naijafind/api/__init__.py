"""
API package - Flask blueprints.

- v1      authenticated user API   (/api/v1)
- public  anonymous API            (/api/public)
- admin   moderation API           (/api/admin)
- bootstrap                        (/init, /admin/create, /categories/init)
"""
