# Services package.
#
# Each module exposes async functions holding the business rules for one
# aggregate:
#
#   newsfeed_service  — post lifecycle (create / read / update / soft delete)
#   profile_service   — profile CRUD with soft delete
#   user_service      — account creation and password changes
#   follower_service  — follow requests and their status
#
# Every function takes an AsyncSession first; the router layer owns the
# transaction through the ``get_db`` / ``get_readonly_db`` dependencies.
# Business-rule violations are raised as ``instafeed.exceptions`` errors.
