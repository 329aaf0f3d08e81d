# create_admin.py
import logging
from getpass import getpass # For securely getting password input

from jobboard.config import Settings
from jobboard.db.database import make_engine, make_session_factory, prepare_database
from jobboard.errors import JobBoardError
from jobboard.services.credentials import CredentialStore

# Configure basic logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger(__name__)


def create_new_admin_user(credentials: CredentialStore):
    log.info("--- Admin User Creation Script ---")

    try:
        name = input("Enter display name for the new admin: ").strip()
        if not name:
            log.error("Name cannot be empty.")
            return

        email = input("Enter email for the new admin: ").strip()
        if not email:
            log.error("Email cannot be empty.")
            return

        while True:
            password = getpass("Enter a password for the new admin: ")
            password_confirm = getpass("Confirm the password: ")
            if password != password_confirm:
                log.warning("Passwords do not match. Please try again.")
                continue
            if not password:
                log.warning("Password cannot be empty. Please try again.")
                continue
            break

        try:
            admin = credentials.register(email, password, name, "admin")
        except JobBoardError as e:
            log.error(f"Cannot create admin: {e.message}")
            return

        log.info("--- Successfully created new admin user ---")
        log.info(f"  ID:    {admin.id}")
        log.info(f"  Name:  {admin.name}")
        log.info(f"  Email: {admin.email}")
        log.info(f"  Role:  {admin.role}")

    except KeyboardInterrupt:
        log.info("\nAdmin creation process cancelled by user.")


if __name__ == "__main__":
    settings = Settings.from_env()
    engine = make_engine(settings.db_url)
    session_factory = make_session_factory(engine)

    log.info("Preparing database (ensuring tables exist)...")
    prepare_database(engine, session_factory)
    create_new_admin_user(CredentialStore(session_factory))
