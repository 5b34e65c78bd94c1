import sys
import os

# Add your project directory to the sys.path
project_home = '/home/YOUR_USERNAME/comrade'
if project_home not in sys.path:
    sys.path.insert(0, project_home)

# Set the working directory
os.chdir(project_home)

# Set FLASK_ENV=production and ADMIN_KEY in the web app's environment
from app import app as application
