# backend/models/__init__.py
# This file simply re-exports the models so `import models` works as before.
from .contact_message import *
