from sqlmodel import Session, select
from app.database import engine
from app.models.profile import Profile
from app.models.user import User


def backfill_profiles(session: Session) -> int:
    """Crea el perfil vacío de los usuarios registrados antes de que existiera."""
    created = 0
    users = session.exec(select(User)).all()
    for user in users:
        if session.get(Profile, user.id) is None:
            session.add(Profile(user_id=user.id))
            created += 1
            print(f"✅ Perfil creado para usuario {user.email}")
    session.commit()
    return created

if __name__ == "__main__":
    with Session(engine) as session:
        total = backfill_profiles(session)
    print(f"🎉 Backfill completado ({total} perfiles).")
