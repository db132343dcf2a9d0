# scripts/generate_data.py

import pickle

from data.generator import generate_multiple_instances


def main():
    # Generate random instances
    instances = generate_multiple_instances(
        count=100,
        seed=54321,
        orders=50,
        max_step=13,
        max_amount=20
    )

    with open("test_instances.pkl", "wb") as f:
        pickle.dump(instances, f)
    with open("single_instance.pkl", "wb") as f:
        pickle.dump(instances[0], f)
    print(f"Saved {len(instances)} instances to test_instances.pkl")

if __name__=="__main__":
    main()
