from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import sections
from . import content_blocks
from . import education
from . import experience
from . import skills
from . import projects
from . import testimonials
from . import contact
from . import uploads
from . import settings
