"""Extending expect() with an assertion for UUIDs."""

from uuid import UUID, uuid1, uuid4

from assertive import Assertion, AssertionFailedError, Plugin, expect, use_plugin


class UUIDAssertion(Assertion[UUID]):
    """Assertions for UUID values."""

    def to_have_version(self, version: int) -> "UUIDAssertion":
        return self.execute(
            assert_when=self.value.version == version,
            error=AssertionFailedError(
                f"Expected UUID to be version {version}", actual=self.value.version, expected=version
            ),
            inverted_error=AssertionFailedError(f"Expected UUID NOT to be version {version}"),
        )

    def to_be_nil(self) -> "UUIDAssertion":
        return self.execute(
            assert_when=self.value.int == 0,
            error=AssertionFailedError("Expected the nil UUID", actual=self.value),
            inverted_error=AssertionFailedError("Expected a UUID other than nil"),
        )


UUIDPlugin = Plugin(UUIDAssertion, lambda value: isinstance(value, UUID), "top")


def main():
    use_plugin(UUIDPlugin)

    expect(uuid4()).to_have_version(4).not_.to_be_nil()
    expect(uuid1()).not_.to_have_version(4)
    expect(UUID(int=0)).to_be_nil()


if __name__ == "__main__":
    main()
