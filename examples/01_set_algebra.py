from bitvec import BitVector


def main():
    evens = BitVector(16)
    for index in range(0, 16, 2):
        evens.set(index)

    low = BitVector(8).set_range(0, 8)

    print("evens:      ", evens.to_bitstring())
    print("low:        ", low.to_bitstring())
    print("evens | low:", (evens | low).to_bitstring())
    print("evens & low:", (evens & low).to_bitstring())
    print("evens ^ low:", (evens ^ low).to_bitstring())
    print("~evens:     ", (~evens).to_bitstring())
    print("set bits:   ", evens.count())


if __name__ == "__main__":
    main()
