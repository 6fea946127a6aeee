"""1 到 n 的整数求和，三种等价实现"""


def sum_to_n_a(n: int) -> int:
    """迭代实现，从 1(或 -1) 逐步累加到 n"""
    total = 0
    if n == 0:
        return total
    step = 1 if n > 0 else -1
    i = step
    while i != n + step:
        total += i
        i += step
    return total


def sum_to_n_b(n: int) -> int:
    """公式实现 n(n+1)/2，负数按对称方式处理"""
    if n == 0:
        return 0
    m = abs(n)
    total = m * (m + 1) // 2
    return total if n > 0 else -total


def sum_to_n_c(n: int) -> int:
    """递归实现，受解释器递归深度限制"""
    if n == 0:
        return 0
    if n > 0:
        return n + sum_to_n_c(n - 1)
    return n + sum_to_n_c(n + 1)
