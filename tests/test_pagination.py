from laptop_finder.pagination import paginate, total_pages


def test_total_pages():
    assert total_pages(0, 8) == 0
    assert total_pages(5, 8) == 1
    assert total_pages(8, 8) == 1
    assert total_pages(9, 8) == 2
    assert total_pages(9, 0) == 0


def test_first_and_last_page():
    seq = list(range(10))
    assert paginate(seq, 1, 4) == ((0, 1, 2, 3), 10, 3)
    assert paginate(seq, 3, 4) == ((8, 9), 10, 3)


def test_out_of_range_pages_are_empty():
    seq = list(range(5))
    assert paginate(seq, 3, 8) == ((), 5, 1)
    assert paginate(seq, 0, 8) == ((), 5, 1)
    assert paginate(seq, -2, 2) == ((), 5, 3)
    assert paginate(seq, 1, 0) == ((), 5, 0)


def test_pages_cover_sequence_exactly_once():
    seq = list(range(23))
    page_items, _, pages = paginate(seq, 1, 5)
    joined = []
    for page in range(1, pages + 1):
        joined.extend(paginate(seq, page, 5)[0])
    assert joined == seq
