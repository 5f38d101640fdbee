"""Quicksort variants that return new sorted lists and leave their input alone."""


def _lomuto(arr, low, high):
    """Partition around the last element; smaller values move to the left."""
    pivot = arr[high]
    store = low
    for scan in range(low, high):
        if arr[scan] < pivot:
            arr[store], arr[scan] = arr[scan], arr[store]
            store += 1
    arr[store], arr[high] = arr[high], arr[store]
    return store


def _first_pivot(arr, low, high):
    """Partition around the first element, stepping both cursors after a swap."""
    pivot = arr[low]
    i, j = low + 1, high
    while True:
        while i <= j and arr[i] < pivot:
            i += 1
        while i <= j and arr[j] > pivot:
            j -= 1
        if i > j:
            break
        arr[i], arr[j] = arr[j], arr[i]
        i += 1
        j -= 1
    arr[low], arr[j] = arr[j], arr[low]
    return j


def _inclusive_pivot(arr, low, high):
    """Partition around the first element, keeping values equal to it on the left."""
    pivot = arr[low]
    i, j = low + 1, high
    while True:
        while i <= j and arr[i] <= pivot:
            i += 1
        while i <= j and arr[j] > pivot:
            j -= 1
        if i > j:
            break
        arr[i], arr[j] = arr[j], arr[i]
    arr[low], arr[j] = arr[j], arr[low]
    return j


def _partitions(arr, partition):
    """Quicksort ``arr`` in place, yielding the upper bound of each partitioned range.

    Ranges are handled in the same order as the recursive formulation:
    the left part and everything below it before the right part.
    """
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(arr, low, high)
            yield high
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))


def _sorted_with(items, partition):
    arr = list(items)
    for _ in _partitions(arr, partition):
        pass
    return arr


def quicksort_steps(items):
    """Yield the working array after each partition step of a last-pivot quicksort.

    Each snapshot holds the array from its start up to the end of the range
    that was just partitioned.
    """
    arr = list(items)
    for high in _partitions(arr, _lomuto):
        yield arr[: high + 1]


def quicksort(items):
    """Return the items sorted with a last-element-pivot quicksort."""
    return _sorted_with(items, _lomuto)


def first_pivot_quicksort(items):
    """Return the items sorted with a first-element-pivot quicksort."""
    return _sorted_with(items, _first_pivot)


def inclusive_pivot_quicksort(items):
    """Return the items sorted with a first-pivot quicksort that groups equal values left."""
    return _sorted_with(items, _inclusive_pivot)