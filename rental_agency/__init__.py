from flask import Flask

from .controllers.customers import bp as customers_bp
from .controllers.rentals import bp as rentals_bp
from .controllers.vehicles import bp as vehicles_bp
from .controllers.views import bp as views_bp
from .models.agency import RentalAgency


def create_app(config=None):
    app = Flask(__name__)
    app.config["SECRET_KEY"] = "dev-secret-change-me"
    if config:
        app.config.update(config)
    RentalAgency.instance()  # in-memory catalog, log and registry
    app.register_blueprint(views_bp)
    app.register_blueprint(vehicles_bp)
    app.register_blueprint(customers_bp)
    app.register_blueprint(rentals_bp)

    return app
