"""Helpers for reading whole collections through Protean querysets."""

PAGE_SIZE = 100


def fetch_all(queryset, page_size=PAGE_SIZE):
    """Yield every record matched by ``queryset``, one page at a time.

    Querysets are limited by default, so large collections are walked with
    explicit offsets instead of relying on the provider's default limit.
    """
    offset = 0
    while True:
        page = queryset.offset(offset).limit(page_size).all().items
        yield from page
        if len(page) < page_size:
            return
        offset += page_size
