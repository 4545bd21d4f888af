# recipe_keeper/__init__.py
