import simplerotations as sr
import timeit
import numpy as np

if __name__ == "__main__":
    N = 100_000
    rng = np.random.default_rng(0)

    axis = np.array([1.0, 2.0, 3.0])
    angle = 0.7
    R = sr.axang2rotm(axis, angle)  # warmup
    q = sr.rotm2quat(R)
    M = rng.standard_normal((3, 3))
    R2 = sr.randrotation(rng)

    # conversions
    print("axang2rotm: ", timeit.timeit(
        lambda: sr.axang2rotm(axis, angle), number=N))
    print("rotm2axang: ", timeit.timeit(lambda: sr.rotm2axang(R), number=N))
    print("rotm2quat: ", timeit.timeit(lambda: sr.rotm2quat(R), number=N))
    print("quat2rotm: ", timeit.timeit(lambda: sr.quat2rotm(q), number=N))

    # utilities
    print("randrotation: ", timeit.timeit(
        lambda: sr.randrotation(rng), number=N))
    print("project2SO3: ", timeit.timeit(lambda: sr.project2SO3(M), number=N))
    print("roterror: ", timeit.timeit(lambda: sr.roterror(R, R2), number=N))

    # quaternion operators
    print("omega1: ", timeit.timeit(lambda: sr.omega1(q), number=N))
    print("omega2: ", timeit.timeit(lambda: sr.omega2(q), number=N))
    print("quatmul: ", timeit.timeit(lambda: sr.quatmul(q, q), number=N))
