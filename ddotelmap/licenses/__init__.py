"""Generation of the third-party licence listing."""