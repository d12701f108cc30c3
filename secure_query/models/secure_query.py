"""
SecureQuery mapping.

A read-only mapping from field names to tagged text values that turns into
plain request parameters by encrypting its secure fields with a crypto
provider. One mapping replaces the usual pair of "values" and "which values
to encrypt" dictionaries.
"""

import logging
from typing import (
    TYPE_CHECKING,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from ..errors import EncryptionError
from ..utils.data_masker import DataMasker
from ..utils.query_string import as_query_string
from .text import PlainText, SecureText, Text, to_text

if TYPE_CHECKING:
    from ..services.crypto_provider import CryptoProvider
    from .config import SecureQueryConfig

logger = logging.getLogger(__name__)

QueryValue = Union[str, Text]


class SecureQuery(Mapping[str, Text]):
    """
    Request parameters holding both plain and secure values.

    Examples:
        >>> query = SecureQuery([("username", "Alice"), ("password", SecureText("Hello, Bob!"))])
        >>> query.get("username")
        PlainText(kind='plain', text='Alice')
        >>> query.get("email") is None
        True
    """

    def __init__(
        self,
        pairs: Union[Iterable[Tuple[str, QueryValue]], Mapping[str, QueryValue]] = (),
        /,
        **fields: QueryValue,
    ):
        """
        Build the mapping from key/value pairs and keyword fields.

        Bare strings are stored as PlainText. When a key repeats, the last
        occurrence wins; keyword fields are applied after pairs.

        Args:
            pairs: Iterable of (key, value) pairs, or a mapping
            **fields: Additional fields

        Raises:
            TypeError: If a pair is a bare string, a key is not a string or a
                value has an unsupported type
        """
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        pair_list = list(pairs)
        for pair in pair_list:
            if isinstance(pair, (str, bytes)):
                raise TypeError(
                    f"Query pairs must be (key, value) tuples, got {type(pair).__name__}"
                )
        items: Dict[str, Text] = {}
        for key, value in pair_list + list(fields.items()):
            if not isinstance(key, str):
                raise TypeError(f"Query keys must be str, got {type(key).__name__}")
            items[key] = to_text(value)
        self._items = items

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, QueryValue],
        secure_keys: Iterable[str] = (),
        detect_sensitive: bool = False,
    ) -> "SecureQuery":
        """
        Build a SecureQuery from a plain dictionary.

        String values are marked secure when their key is listed in
        ``secure_keys`` or, with ``detect_sensitive``, when the key looks
        sensitive (password, token, ...). Tagged values are kept as given.

        Args:
            data: Mapping of field names to strings or tagged values
            secure_keys: Keys whose string values must be encrypted
            detect_sensitive: Also mark keys recognized by DataMasker as secure

        Returns:
            New SecureQuery
        """
        forced = set(secure_keys)
        pairs = []
        for key, value in data.items():
            if isinstance(value, str) and (
                key in forced or (detect_sensitive and DataMasker.is_sensitive_field(key))
            ):
                pairs.append((key, SecureText(value)))
            else:
                pairs.append((key, value))
        return cls(pairs)

    def __getitem__(self, key: str) -> Text:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SecureQuery({self.masked()!r})"

    def secure_keys(self) -> FrozenSet[str]:
        """Keys holding SecureText values."""
        return frozenset(key for key, value in self._items.items() if value.is_secure)

    def masked(self) -> Dict[str, str]:
        """
        Plain view for logging, with secure values replaced by a mask.

        Returns:
            Dictionary of keys to plain text or the masked placeholder
        """
        return DataMasker.mask_fields(
            {key: value.text for key, value in self._items.items()}, self.secure_keys()
        )

    def encrypted(self, crypto_provider: "CryptoProvider") -> Dict[str, str]:
        """
        Convert into plain request parameters, encrypting secure values.

        Plain values are copied as-is without touching the provider. For each
        secure value the provider is called as ``encrypt``, ``get_secure_text``
        and then ``clear``. ``clear`` also runs when one of the first two calls
        raises; the original error is re-raised even if that ``clear`` fails.

        Args:
            crypto_provider: Provider used to encrypt secure values

        Returns:
            Dictionary with the same keys and plain or encrypted values

        Raises:
            Exception: Whatever the provider raises; the conversion stops at
                the first failure and no partial result is returned
        """
        result: Dict[str, str] = {}
        secure_count = 0

        for key, value in self._items.items():
            if isinstance(value, PlainText):
                result[key] = value.text
                continue

            try:
                crypto_provider.encrypt(value.text)
                secure_text = crypto_provider.get_secure_text()
            except Exception as e:
                if isinstance(e, EncryptionError) and e.field_name is None:
                    e.field_name = key
                try:
                    crypto_provider.clear()
                except Exception:
                    logger.debug(f"Failed to clear crypto provider after error on field '{key}'")
                raise
            crypto_provider.clear()
            result[key] = secure_text
            secure_count += 1

        logger.debug(f"Prepared {len(result)} query fields ({secure_count} encrypted)")
        return result

    def encrypted_query(
        self,
        crypto_provider: "CryptoProvider",
        safe: Optional[str] = None,
        space_as_plus: Optional[bool] = None,
        config: Optional["SecureQueryConfig"] = None,
    ) -> str:
        """
        Encrypt secure values and serialize the result as a query string.

        Encoding options default to the values in ``config`` when given,
        otherwise to '' and True.

        Args:
            crypto_provider: Provider used to encrypt secure values
            safe: Extra characters to leave unescaped
            space_as_plus: Encode spaces as '+' instead of '%20'
            config: Optional configuration supplying encoding defaults

        Returns:
            URL-encoded query string without a leading '?'
        """
        if safe is None:
            safe = config.query_safe_chars if config is not None else ""
        if space_as_plus is None:
            space_as_plus = config.query_space_as_plus if config is not None else True
        return as_query_string(
            self.encrypted(crypto_provider), safe=safe, space_as_plus=space_as_plus
        )


def decrypt_fields(
    params: Mapping[str, str], crypto_provider: "CryptoProvider", keys: Iterable[str]
) -> Dict[str, str]:
    """
    Decrypt selected values of a plain mapping, e.g. from a response.

    Keys missing from params are ignored.

    Args:
        params: Plain key/value mapping
        crypto_provider: Provider used to decrypt values
        keys: Keys whose values are encrypted

    Returns:
        Copy of params with the given values decrypted
    """
    result = dict(params)
    for key in keys:
        if key in result:
            result[key] = crypto_provider.decrypt(result[key])
    return result
