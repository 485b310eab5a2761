"""
Basic Login Example - Check both accounts and print the JSON response shape.
"""

import json

from school_login import LoginClient, LoginResult


def main():
    client = LoginClient()

    print(f"Accepted roles: {', '.join(client.roles())}")

    attempts = [
        ("teacher", "teacher@school.edu", "password123"),
        ("teacher", "teacher@school.edu", "wrongpass"),
        ("student", "STU001", "student123"),
        ("admin", "root", "toor"),
    ]

    for role, identifier, password in attempts:
        result = client.check(role, identifier, password)
        line = result.render()
        print(f"\n{role} / {identifier}: {line}")

        # What a web layer reading the CLI output would return
        parsed = LoginResult.parse(line)
        print(json.dumps(parsed.to_dict()))


if __name__ == "__main__":
    main()
