from models.db_storage import DBStorage

# Tables and the scoped session are set up by storage.reload(), called from create_app()
storage = DBStorage()
