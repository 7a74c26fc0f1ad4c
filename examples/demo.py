from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser
import logging

from minitensor import cpprint, new_tensor
from minitensor.utils import constants


class Parser(ArgumentParser):
    def __init__(self, *args, **kwargs):
        kwargs["formatter_class"] = ArgumentDefaultsHelpFormatter
        super().__init__(*args, **kwargs)

    def add_demo_arguments(self):
        self.add_argument(
            "--indices",
            type=int,
            nargs="+",
            default=[0, 0, 1, 1],
            help="Row indices for index select",
        )
        self.add_argument(
            "--verbose", action="store_true", default=False, help="Verbose"
        )


def main(args):
    if args.verbose:
        logging.basicConfig(format=constants.LOG_FORMAT, level=logging.DEBUG)

    tensor_shape = [2, 2]
    tensor = new_tensor(tensor_shape, [[1, 2], [3, 4]])

    reshaped = tensor.reshape([4])
    print("Reshape:")
    cpprint(reshaped)

    other = new_tensor(tensor_shape, [[2, 2], [2, 2]])
    hadamard_product = tensor.hadamard_product(other)
    print("Hadamard Product:")
    cpprint(hadamard_product)

    selected = tensor.index_select(0, args.indices)
    print("Index Select:")
    cpprint(selected)

    return reshaped, hadamard_product, selected


if __name__ == "__main__":
    parser = Parser(description="Tensor reshape, Hadamard product and index select")
    parser.add_demo_arguments()
    args = parser.parse_args()
    main(args)
