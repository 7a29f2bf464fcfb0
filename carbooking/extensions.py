from flask_cors import CORS
from flask_mail import Mail

mail = Mail()
cors = CORS()
