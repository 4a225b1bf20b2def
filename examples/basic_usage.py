"""Basic usage example for assertive."""

import asyncio
from datetime import date

from assertive import AssertionFailedError, TypeFactories, expect


async def fetch_user(user_id):
    await asyncio.sleep(0)
    if user_id != 7:
        raise LookupError(f"user {user_id} not found")
    return {"id": 7, "name": "Alice", "roles": ["admin", "billing"], "joined": date(2024, 1, 1)}


async def main():
    """Demonstrate the most common checks."""

    user = await expect(fetch_user(7)).to_be_resolved()

    expect(user).to_contain_all_keys("id", "name").to_partially_match({"name": "Alice"})
    expect(user["roles"]).to_have_size(2).to_contain_any("admin")
    expect(user["joined"]).to_be_day_of_week("monday").to_be_before(date.today())
    expect(user["name"]).to_start_with("A").not_.to_be_blank()

    expect(user["roles"]).extracting(0, TypeFactories.STRING).to_be_equal_ignoring_case("ADMIN")

    error = await expect(fetch_user(8)).to_be_rejected()
    expect(error).to_have_name("LookupError").to_have_message_ending_with("not found")

    expect(lambda: int("seven")).to_throw_error(ValueError).to_have_message_containing("invalid literal")

    try:
        expect(user["id"]).to_be_between(10, 20)
    except AssertionFailedError as failure:
        print("Failure report:", failure.report.to_payload())


if __name__ == "__main__":
    asyncio.run(main())
