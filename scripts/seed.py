"""Seed the Instafeed database with users, profiles, posts and follow requests."""
import asyncio
import argparse
import random
import time
from datetime import datetime, timezone, timedelta
from instafeed.database import engine, async_session, Base
from instafeed.models import Follower, FollowStatus, Newsfeed, Profile, User
from instafeed.security import hash_password

TOPICS = ["coffee", "hiking", "python", "sunsets", "cats", "street food",
          "running", "books", "jazz", "travel", "gardening", "photography"]

async def seed(small: bool = False):
    num_users = 10 if small else 200
    num_posts = 100 if small else 5000
    follows_per_profile = 3 if small else 15

    print(f"Seeding: {num_users} users, {num_posts} posts, ~{num_users * follows_per_profile} follow requests")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    # One hash for everyone; pbkdf2 is slow on purpose.
    password = hash_password("password123")

    async with async_session() as session:
        profiles = []
        for i in range(num_users):
            user = User(name=f"user{i:04d}", email=f"user{i:04d}@example.com", password=password)
            session.add(user)
            await session.flush()
            profile = Profile(
                user_id=user.id,
                nickname=f"nick_{i:04d}",
                content=f"I post about {random.choice(TOPICS)}.",
                is_deleted=random.random() < 0.05,
            )
            session.add(profile)
            profiles.append(profile)
        await session.flush()
        print(f"  Created {len(profiles)} users with profiles")

        active = [p for p in profiles if not p.is_deleted]
        for i in range(num_posts):
            touched = datetime.now(timezone.utc) - timedelta(minutes=random.randint(0, 60 * 24 * 90))
            post = Newsfeed.create(
                random.choice(active),
                f"Post {i}: today was all about {random.choice(TOPICS)}.",
                f"/images/{i}.jpg" if random.random() > 0.3 else None,
            )
            post.created_at = touched
            post.updated_at = touched
            post.is_deleted = random.random() < 0.1
            session.add(post)
        await session.flush()
        print(f"  Created {num_posts} posts")

        follows = 0
        for sender in active:
            others = [p for p in active if p.id != sender.id]
            for receiver in random.sample(others, k=min(follows_per_profile, len(others))):
                session.add(Follower(
                    sender_profile_id=sender.id,
                    receiver_profile_id=receiver.id,
                    status=random.choice(list(FollowStatus)),
                ))
                follows += 1
        await session.commit()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Profiles: {len(profiles)} ({len(profiles) - len(active)} deleted)")
    print(f"  Posts: {num_posts}")
    print(f"  Follow requests: {follows}")


def main():
    parser = argparse.ArgumentParser(description="Seed the Instafeed database")
    parser.add_argument("--small", action="store_true", help="Use small dataset (100 posts)")
    args = parser.parse_args()
    asyncio.run(seed(small=args.small))


if __name__ == "__main__":
    main()
